"""FastAPI dependency injection for application settings."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from matchday.config import Settings


async def get_settings(request: Request) -> Settings:
    """Get the settings the app was created with."""
    return request.app.state.settings


SettingsDep = Annotated[Settings, Depends(get_settings)]
