# region Docstring
"""
cliphoard.models.app_config
User facing options shared by every cliphoard process.
Overview:
- Provides a Pydantic model for the options persisted in ``config.json``:
    history capacity, theme and start-at-login.
Contents:
- Pydantic models:
    - AppConfig:
        max_history (int, default 50), theme (Theme, default dark),
        start_login (bool, default False).
Design notes:
- AppConfig is loaded fresh from disk by each process before each mutation
    (see cliphoard.storage.ConfigGateway), so a change made by one process applies
    to the next operation of every other process.
- theme and start_login are presentation options; the store only reads max_history.
"""
# endregion
# region Imports
from cliphoard.constants import DEFAULT_MAX_HISTORY, DEFAULT_THEME, Theme
from cliphoard.imports import BaseModel, ConfigDict, Field

# endregion
# region Pydantic Model


class AppConfig(BaseModel):
    max_history: int = Field(
        DEFAULT_MAX_HISTORY,
        ge=1,
        description="Maximum number of history entries kept, pinned entries excepted",
    )
    theme: Theme = Field(DEFAULT_THEME, description="Presentation theme (dark, light)")
    start_login: bool = Field(
        False, description="Whether the watcher should be started at login"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "max_history": 50,
                    "theme": "dark",
                    "start_login": False,
                }
            ]
        },
        validate_assignment=True,
    )


# endregion

__all__ = ["AppConfig"]
