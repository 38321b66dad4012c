# tests/conftest.py
import os
from unittest.mock import MagicMock

import pytest

from dumpman.config import get_settings
from dumpman.storage.base import StorageClient


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """
    Runs every test from an empty working directory with no DUMPMAN_*
    variables, so a developer's .env or shell never leaks into settings.
    """
    for key in list(os.environ):
        if key.startswith("DUMPMAN_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sd_card(tmp_path):
    """Builds a fake SD card root with a DCIM/100CANON content directory."""
    root = tmp_path / "card"
    content = root / "DCIM" / "100CANON"
    content.mkdir(parents=True)
    for number in (7, 3, 4, 12):
        (content / f"MVI_{number:04d}.MOV").write_bytes(f"video {number}".encode())
    (content / "IMG_0001.JPG").write_bytes(b"photo")
    (content / "MVI_9999.MOV.xmp").write_text("sidecar")
    (content / "MISC").mkdir()
    return root


@pytest.fixture
def out_dir(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def mock_storage_client():
    """Fixture for a mock storage client."""
    return MagicMock(spec=StorageClient)


@pytest.fixture
def scripted_prompt():
    """Returns a factory for prompt callables that replay canned replies."""

    def factory(*replies):
        prompt = MagicMock(side_effect=list(replies))
        return prompt

    return factory
