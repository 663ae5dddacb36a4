"""Configuration: .env loading, paths, constants."""

import os
from pathlib import Path
from dotenv import load_dotenv

# Project root = parent of travel_flow/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

# --- Language ---
SUPPORTED_LANGS = ("it", "en")
DEFAULT_LANG = os.getenv("TRAVEL_FLOW_LANG", "it")
if DEFAULT_LANG not in SUPPORTED_LANGS:
    DEFAULT_LANG = "en"

# --- Views ---
VIEW_MODES = ("list", "cards", "calendar")
DEFAULT_VIEW_MODE = os.getenv("TRAVEL_FLOW_VIEW", "list")
CARD_DESCRIPTION_MAX_CHARS = 60  # activity card description budget
SEARCH_DEBOUNCE_MS = 300  # recommended delay for search-as-you-type adapters

# --- Paths ---
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "output")))
