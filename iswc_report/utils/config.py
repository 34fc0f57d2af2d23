# iswc_report/utils/config.py

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Project Paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
DATA_PATH = PROJECT_ROOT / "data"
TURTLE_DIR = Path(os.getenv("ISWC_TURTLE_DIR", DATA_PATH / "ttl"))
REPORT_OUTPUT = Path(os.getenv("ISWC_REPORT_OUTPUT", "PublicacionesISWC2019.html"))

# Source files
SOURCE_SUFFIXES = (".ttl",)
SOURCE_FORMAT = "turtle"
LOAD_WORKERS = int(os.getenv("ISWC_LOAD_WORKERS", "1"))

# Author chains
MAX_CHAIN_HOPS = int(os.getenv("ISWC_MAX_CHAIN_HOPS", "10000"))
AUTHOR_CONJUNCTION = os.getenv("ISWC_AUTHOR_CONJUNCTION", "y")

# Report text
REPORT_TITLE = "Publicaciones ISWC 2019"
REPORT_INTRO = (
    "ISWC es el principal foro internacional para la comunidad de datos enlazados "
    "y web semántica. Esta página enumera las publicaciones de los tópicos Research, "
    "In-Use y Resource, agrupadas por país."
)
TAILWIND_CSS_URL = "https://cdn.jsdelivr.net/npm/tailwindcss@2.2.19/dist/tailwind.min.css"

# Logging
LOG_FILE = os.getenv("ISWC_LOG_FILE")

# Debug
DEBUG_MODE = os.getenv("DEBUG_MODE", "false").lower() == "true"
