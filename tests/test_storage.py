"""
Tests for the history and config persistence gateways.
"""

import json
from datetime import datetime, timezone

import pytest

from cliphoard.constants import ClipKind, Theme
from cliphoard.models import AppConfig, ClipboardHistory
from cliphoard.storage import ConfigGateway, HistoryCorruptError, HistoryGateway


@pytest.fixture
def sample_store() -> ClipboardHistory:
    store = ClipboardHistory()
    store.add("first text", ClipKind.TEXT, None, 50)
    store.add("/data/images/ab12.png", ClipKind.IMAGE, "ab12", 50)
    store.add("multi\nline\ntext", ClipKind.TEXT, None, 50)
    store.set_pinned(1, True)
    return store


# region History Gateway


class TestHistoryGateway:
    def test_default_paths_follow_settings(self, history_gateway, data_dir):
        assert history_gateway.path.resolve() == (data_dir / "history.json").resolve()
        assert history_gateway.images_dir.resolve() == (data_dir / "images").resolve()

    def test_load_missing_file_returns_empty_store(self, history_gateway):
        store = history_gateway.load()
        assert len(store) == 0
        assert not history_gateway.path.exists()

    def test_round_trip(self, history_gateway, sample_store):
        history_gateway.save(sample_store)
        loaded = history_gateway.load()
        assert loaded == sample_store
        assert [i.content for i in loaded.history] == [
            "multi\nline\ntext",
            "/data/images/ab12.png",
            "first text",
        ]
        assert loaded[1].pinned is True
        assert loaded[1].kind == ClipKind.IMAGE
        assert loaded[1].hash == "ab12"

    def test_round_trip_empty_store(self, history_gateway):
        history_gateway.save(ClipboardHistory())
        assert history_gateway.load() == ClipboardHistory()

    def test_save_creates_parent_directories(self, tmp_path):
        gateway = HistoryGateway(path=tmp_path / "a" / "b" / "history.json")
        gateway.save(ClipboardHistory())
        assert gateway.path.exists()

    def test_save_writes_pretty_json(self, history_gateway, sample_store):
        history_gateway.save(sample_store)
        text = history_gateway.path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "history": [')
        raw = json.loads(text)
        assert raw["history"][1] == {
            "content": "/data/images/ab12.png",
            "timestamp": raw["history"][1]["timestamp"],
            "pinned": True,
            "kind": "image",
            "hash": "ab12",
        }
        assert raw["history"][0]["hash"] is None

    def test_save_overwrites_whole_file(self, history_gateway, sample_store):
        history_gateway.save(sample_store)
        smaller = ClipboardHistory()
        smaller.add("only", ClipKind.TEXT, None, 50)
        history_gateway.save(smaller)
        assert [i.content for i in history_gateway.load().history] == ["only"]

    @pytest.mark.parametrize(
        "content",
        [
            "{not json",
            "",
            '{"history": [{"kind": "text"}]}',
            '{"history": "nope"}',
            '{"history": [{"content": "x", "kind": "text", "hash": "aa"}]}',
        ],
    )
    def test_load_malformed_file_raises(self, history_gateway, content):
        history_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        history_gateway.path.write_text(content, encoding="utf-8")
        with pytest.raises(HistoryCorruptError) as exc_info:
            history_gateway.load()
        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.path == history_gateway.path

    def test_load_invalid_utf8_raises_corrupt(self, history_gateway):
        history_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        history_gateway.path.write_bytes(b"\xff\xfe")
        with pytest.raises(HistoryCorruptError) as exc_info:
            history_gateway.load()
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_load_fills_defaults_for_older_records(self, history_gateway):
        history_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        history_gateway.path.write_text(
            json.dumps(
                {"history": [{"content": "old", "timestamp": "2024-01-01T12:00:00+00:00"}]}
            ),
            encoding="utf-8",
        )
        item = history_gateway.load()[0]
        assert item.kind == ClipKind.TEXT
        assert item.pinned is False
        assert item.hash is None
        assert item.timestamp == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)

    def test_ensure_images_dir(self, history_gateway):
        images_dir = history_gateway.ensure_images_dir()
        assert images_dir.is_dir()
        assert images_dir == history_gateway.images_dir


# endregion
# region Config Gateway


class TestConfigGateway:
    def test_default_path_follows_settings(self, config_gateway, config_dir):
        assert config_gateway.path.resolve() == (config_dir / "config.json").resolve()

    def test_load_missing_file_returns_defaults(self, config_gateway):
        config = config_gateway.load()
        assert config == AppConfig()
        assert config.max_history == 50
        assert config.theme == Theme.DARK
        assert config.start_login is False

    @pytest.mark.parametrize(
        "content",
        [
            "{broken",
            "",
            '{"max_history": "many"}',
            '{"max_history": 0}',
            '{"theme": "blue"}',
        ],
    )
    def test_load_malformed_file_returns_defaults(self, config_gateway, content):
        config_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        config_gateway.path.write_text(content, encoding="utf-8")
        assert config_gateway.load() == AppConfig()

    @pytest.mark.parametrize(
        "content", [b"\xff\xfe", b'{"max_history": 5, "theme": "\xff"}']
    )
    def test_load_invalid_utf8_returns_defaults(self, config_gateway, content):
        config_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        config_gateway.path.write_bytes(content)
        assert config_gateway.load() == AppConfig()

    def test_partial_file_keeps_other_defaults(self, config_gateway):
        config_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        config_gateway.path.write_text('{"max_history": 7}', encoding="utf-8")
        config = config_gateway.load()
        assert config.max_history == 7
        assert config.theme == Theme.DARK

    def test_round_trip(self, config_gateway):
        config = AppConfig(max_history=12, theme=Theme.LIGHT, start_login=True)
        config_gateway.save(config)
        assert config_gateway.load() == config
        raw = json.loads(config_gateway.path.read_text(encoding="utf-8"))
        assert raw == {"max_history": 12, "theme": "light", "start_login": True}

    def test_save_creates_parent_directories(self, tmp_path):
        gateway = ConfigGateway(path=tmp_path / "nested" / "config.json")
        gateway.save(AppConfig())
        assert gateway.path.exists()


# endregion
