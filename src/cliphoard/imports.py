"""
Core imports for the cliphoard library.

This module centralizes imports from third-party libraries used throughout
cliphoard, ensuring consistency and simplifying dependency management.
"""

import os  # noqa: F401
import json  # noqa: F401


from pydantic_settings import (  # noqa: F401
    BaseSettings,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)
from pydantic import (  # noqa: F401
    Field,
    BaseModel,
    ConfigDict,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from typing import Any, Callable, Dict, List, Optional, Union, Literal  # noqa: F401

from pathlib import Path  # noqa: F401
from datetime import datetime, timedelta, timezone  # noqa: F401
