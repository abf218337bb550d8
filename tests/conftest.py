import logging
from unittest.mock import MagicMock

import pytest

from cliphoard.config import get_settings
from cliphoard.retry import RetryPolicy
from cliphoard.services import HistoryService
from cliphoard.storage import ConfigGateway, HistoryGateway

CLIPHOARD_ENV_VARS = [
    "CLIPHOARD_ENV",
    "CLIPHOARD_DATA_DIR",
    "CLIPHOARD_CONFIG_DIR",
    "CLIPHOARD_RETRY_ATTEMPTS",
    "CLIPHOARD_RETRY_BASE_DELAY",
    "CLIPHOARD_POLL_INTERVAL",
    "CLIPHOARD_LOG_LEVEL",
    "CLIPHOARD_LOG_DIR",
]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point every cliphoard directory at a temp dir and disable retry delays."""
    for name in CLIPHOARD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    data_dir = tmp_path / "data"
    config_dir = tmp_path / "config"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CLIPHOARD_ENV", "test")
    monkeypatch.setenv("CLIPHOARD_DATA_DIR", str(data_dir))
    monkeypatch.setenv("CLIPHOARD_CONFIG_DIR", str(config_dir))
    monkeypatch.setenv("CLIPHOARD_RETRY_BASE_DELAY", "0")
    get_settings.cache_clear()
    yield {"data_dir": data_dir, "config_dir": config_dir}
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_app_logger():
    """Undo handlers attached by setup_logging() so caplog keeps working."""
    app_logger = logging.getLogger("cliphoard")
    handlers = list(app_logger.handlers)
    level, propagate = app_logger.level, app_logger.propagate
    yield app_logger
    for handler in app_logger.handlers:
        if handler not in handlers:
            handler.close()
    app_logger.handlers = handlers
    app_logger.setLevel(level)
    app_logger.propagate = propagate


@pytest.fixture
def data_dir(isolated_env):
    return isolated_env["data_dir"]


@pytest.fixture
def config_dir(isolated_env):
    return isolated_env["config_dir"]


@pytest.fixture
def history_gateway(data_dir) -> HistoryGateway:
    return HistoryGateway()


@pytest.fixture
def config_gateway(config_dir) -> ConfigGateway:
    return ConfigGateway()


@pytest.fixture
def no_sleep() -> MagicMock:
    """Stand-in for time.sleep recording the requested delays."""
    return MagicMock()


@pytest.fixture
def fast_policy() -> RetryPolicy:
    return RetryPolicy(max_attempts=5, base_delay=0.0)


@pytest.fixture
def service(history_gateway, config_gateway, fast_policy, no_sleep) -> HistoryService:
    return HistoryService(
        gateway=history_gateway,
        config_gateway=config_gateway,
        policy=fast_policy,
        sleep=no_sleep,
    )
