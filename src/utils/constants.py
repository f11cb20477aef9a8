"""Application-wide constants."""

from pathlib import Path

# Application metadata
APP_NAME = "heblex"
APP_VERSION = "0.1.0"
APP_TITLE = "heblex: Hebrew lexicon normalization and lookup"

# Paths
DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "default_config.yaml"
USER_DATA_DIR = Path.home() / ".heblex"
DEFAULT_STORAGE_PATH = USER_DATA_DIR / "lexicon.json"

# Environment overrides
STORAGE_PATH_ENV = "HEBLEX_STORAGE_PATH"

# Import format
IMPORT_SECTION_SEPARATOR = "---"
