import os

import pytest

from data import config
from data.settings import Settings


@pytest.fixture
def files_dir(tmp_path, monkeypatch):
    """Point the files/ folder, logs and settings at a temporary directory."""
    files = tmp_path / "files"
    files.mkdir()
    monkeypatch.setattr(config, "FILES_DIR", str(files))
    monkeypatch.setattr(config, "LOG_DIR", os.path.join(str(files), "logs"))
    monkeypatch.setattr(config, "SETTINGS_FILE", os.path.join(str(files), "settings.json"))
    Settings.reset()
    yield files
    Settings.reset()
