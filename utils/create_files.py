import json
import os
import shutil

from data import config
from data.settings import DEFAULTS, Settings


def create_files() -> None:
    os.makedirs(config.FILES_DIR, exist_ok=True)
    os.makedirs(config.LOG_DIR, exist_ok=True)

    if not os.path.isfile(config.SETTINGS_FILE):
        with open(config.SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(DEFAULTS, f, indent=2)

    settings = Settings()
    for name in (settings.strings_file, settings.payloads_file):
        path = os.path.join(config.FILES_DIR, name)
        if not os.path.isfile(path):
            open(path, "w", encoding="utf-8").close()


def reset_folder() -> None:
    if os.path.isdir(config.FILES_DIR):
        shutil.rmtree(config.FILES_DIR)
    Settings.reset()
    create_files()
