# region Docstring
"""
cliphoard.config.base

Environment detection and platform directory resolution.

Overview:
- Provides a utility class for detecting the current application environment
    (production, development, or test) from an environment variable.
- Resolves the per-user data and config directories for the application using
    platformdirs, with environment variable overrides.

Contents:
- Classes:
    - AppEnv:
        A utility class for environment detection and path resolution. Provides
        class methods to determine the current environment and to locate the data
        directory (history file, image payloads) and the config directory (user
        config, settings YAML).

Environment Detection Logic:
- Checks the CLIPHOARD_ENV environment variable for explicit configuration.
- Falls back to production, the normal mode for an installed desktop tool.

Directory Resolution Logic:
- Priority 1: CLIPHOARD_DATA_DIR / CLIPHOARD_CONFIG_DIR environment variables.
- Priority 2: platformdirs user_data_dir / user_config_dir for APP_NAME.

Design Notes:
- Directories are resolved on every call rather than at import time so that
    several processes (and tests) can point the store at different locations.
- No directory is created here; the gateways create parents on write.

"""
# endregion
# region Imports
from platformdirs import user_config_dir, user_data_dir

from cliphoard.constants import APP_AUTHOR, APP_NAME
from cliphoard.imports import Literal, Path, os

# endregion
# region AppEnv Class


class AppEnv:
    """
    Application environment detection utility.

    Attributes:
        PROD (Literal["prod"]): Constant representing the production environment.
        DEV (Literal["dev"]): Constant representing the development environment.
        TEST (Literal["test"]): Constant representing the test environment.
    """

    PROD: Literal["prod"] = "prod"
    DEV: Literal["dev"] = "dev"
    TEST: Literal["test"] = "test"

    @classmethod
    def environment(cls) -> Literal["prod", "dev", "test"]:
        """Determine the current application environment."""
        env = os.getenv("CLIPHOARD_ENV")
        if env in {cls.PROD, cls.DEV, cls.TEST}:
            return env
        return cls.PROD

    @classmethod
    def data_dir(cls) -> Path:
        """Get the directory holding the history file and image payloads."""
        override = os.getenv("CLIPHOARD_DATA_DIR")
        if override:
            return Path(override).expanduser().resolve()
        return Path(user_data_dir(APP_NAME, APP_AUTHOR))

    @classmethod
    def config_dir(cls) -> Path:
        """Get the directory holding the user config and settings files."""
        override = os.getenv("CLIPHOARD_CONFIG_DIR")
        if override:
            return Path(override).expanduser().resolve()
        return Path(user_config_dir(APP_NAME, APP_AUTHOR))


# endregion

__all__ = ["AppEnv"]
