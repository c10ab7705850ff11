import os

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

FILES_DIR = os.path.join(ROOT_DIR, "files")
LOG_DIR = os.path.join(FILES_DIR, "logs")
SETTINGS_FILE = os.path.join(FILES_DIR, "settings.json")

DECODED_CSV = "decoded.csv"
ENCODED_TXT = "encoded.txt"
