"""
Tests for the clipboard poll loop, using an in-memory clipboard.
"""

import logging
from typing import Optional
from unittest.mock import MagicMock, call, patch

import pytest
from PIL import Image

from cliphoard.constants import ClipKind
from cliphoard.services import ClipboardWatcher
from cliphoard.utils import hash_bytes


class FakeClipboard:
    def __init__(self, text: Optional[str] = None, image: Optional[Image.Image] = None):
        self.text = text
        self.image = image

    def get_text(self) -> Optional[str]:
        return self.text

    def get_image(self) -> Optional[Image.Image]:
        return self.image

    def set_text(self, text: str) -> None:
        self.text = text


@pytest.fixture
def clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def watcher(service, clipboard, no_sleep) -> ClipboardWatcher:
    return ClipboardWatcher(
        service=service, backend=clipboard, poll_interval=0.5, sleep=no_sleep
    )


def red_square() -> Image.Image:
    return Image.new("RGB", (4, 4), "red")


# region Text


class TestTextCapture:
    def test_new_text_is_recorded_once(self, watcher, clipboard, service):
        clipboard.text = "hello"
        assert watcher.poll_once() == ClipKind.TEXT
        assert watcher.poll_once() is None
        assert [i.content for i in service.snapshot().history] == ["hello"]

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_is_ignored(self, watcher, clipboard, service, text):
        clipboard.text = text
        assert watcher.poll_once() is None
        assert len(service.snapshot()) == 0

    def test_changed_text_is_recorded(self, watcher, clipboard, service):
        clipboard.text = "one"
        watcher.poll_once()
        clipboard.text = "two"
        assert watcher.poll_once() == ClipKind.TEXT
        assert [i.content for i in service.snapshot().history] == ["two", "one"]

    def test_text_takes_precedence_over_image(self, service, no_sleep):
        backend = MagicMock()
        backend.get_text.return_value = "text wins"
        backend.get_image.return_value = red_square()
        watcher = ClipboardWatcher(
            service=service, backend=backend, poll_interval=0.5, sleep=no_sleep
        )
        assert watcher.poll_once() == ClipKind.TEXT
        backend.get_image.assert_not_called()


# endregion
# region Images


class TestImageCapture:
    def test_image_is_stored_by_content_address(self, watcher, clipboard, service):
        image = red_square()
        clipboard.image = image
        digest = hash_bytes(image.tobytes())

        assert watcher.poll_once() == ClipKind.IMAGE

        payload = service.images_dir / f"{digest}.png"
        assert payload.exists()
        item = service.snapshot()[0]
        assert item.kind == ClipKind.IMAGE
        assert item.hash == digest
        assert item.content == str(payload)
        with Image.open(payload) as saved:
            assert saved.size == (4, 4)

    def test_same_image_is_not_recorded_twice(self, watcher, clipboard, service):
        clipboard.image = red_square()
        watcher.poll_once()
        clipboard.image = red_square()
        assert watcher.poll_once() is None
        assert len(service.snapshot()) == 1

    def test_existing_payload_is_not_rewritten(self, watcher, clipboard, service):
        image = red_square()
        payload = service.images_dir / f"{hash_bytes(image.tobytes())}.png"
        payload.write_bytes(b"existing")
        clipboard.image = image

        assert watcher.poll_once() == ClipKind.IMAGE
        assert payload.read_bytes() == b"existing"

    def test_image_after_text_resets_text_memory(self, watcher, clipboard, service):
        clipboard.text = "same"
        watcher.poll_once()
        clipboard.text = None
        clipboard.image = red_square()
        assert watcher.poll_once() == ClipKind.IMAGE
        clipboard.text = "same"
        assert watcher.poll_once() == ClipKind.TEXT
        assert len(service.snapshot()) == 2

    def test_payload_write_failure_skips_entry(self, watcher, clipboard, service, caplog):
        clipboard.image = red_square()
        with patch.object(Image.Image, "save", side_effect=OSError("read-only")):
            with caplog.at_level(logging.ERROR, logger="cliphoard"):
                assert watcher.poll_once() == ClipKind.IMAGE
        assert len(service.snapshot()) == 0
        assert any("Failed to save image" in r.getMessage() for r in caplog.records)


# endregion
# region Loop


class TestRun:
    def test_save_failure_is_logged_and_loop_continues(
        self, watcher, clipboard, service, caplog
    ):
        clipboard.text = "first"
        with patch.object(service.gateway, "save", side_effect=OSError("locked")):
            with caplog.at_level(logging.ERROR, logger="cliphoard"):
                assert watcher.poll_once() == ClipKind.TEXT
        assert any(
            "Failed to record clipboard entry" in r.getMessage()
            for r in caplog.records
        )

        clipboard.text = "second"
        assert watcher.poll_once() == ClipKind.TEXT
        assert [i.content for i in service.snapshot().history] == ["second"]

    def test_unusable_images_dir_keeps_loop_running(
        self, watcher, clipboard, service, data_dir, caplog
    ):
        blocker = data_dir / "blocker"
        blocker.parent.mkdir(parents=True, exist_ok=True)
        blocker.write_text("not a directory", encoding="utf-8")
        service.gateway.images_dir = blocker / "images"
        clipboard.image = red_square()

        with caplog.at_level(logging.ERROR, logger="cliphoard"):
            assert watcher.run(max_cycles=2) == 1

        assert len(service.snapshot()) == 0
        assert any("Failed to save image" in r.getMessage() for r in caplog.records)

    def test_unreadable_config_still_records_text(self, watcher, clipboard, service):
        service.config_gateway.path.parent.mkdir(parents=True, exist_ok=True)
        service.config_gateway.path.write_bytes(b"\xff\xfe")
        clipboard.text = "hello"
        assert watcher.poll_once() == ClipKind.TEXT
        assert [i.content for i in service.snapshot().history] == ["hello"]

    def test_run_sleeps_before_each_poll(self, service, clipboard):
        sleep = MagicMock()
        watcher = ClipboardWatcher(
            service=service, backend=clipboard, poll_interval=0.25, sleep=sleep
        )
        clipboard.text = "once"
        assert watcher.run(max_cycles=3) == 1
        assert sleep.call_args_list == [call(0.25)] * 3

    def test_poll_interval_defaults_to_settings(self, service, clipboard, monkeypatch):
        monkeypatch.setenv("CLIPHOARD_POLL_INTERVAL", "1.25")
        watcher = ClipboardWatcher(service=service, backend=clipboard)
        assert watcher.poll_interval == pytest.approx(1.25)


# endregion
