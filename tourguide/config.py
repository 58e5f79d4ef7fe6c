"""
config.py
---------
Central configuration for the trip-planning engine.
All secrets loaded from environment variables — never hard-coded.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (if it exists) so env vars in that file
# are picked up by os.getenv() below.  Won't override vars already set in the shell.
_env_path = Path(__file__).resolve().parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


# ── LLM ──────────────────────────────────────────────────────────────────────
GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
LLM_MODEL_NAME: str = os.getenv("LLM_MODEL_NAME", "gemini-1.5-flash")
LLM_TIMEOUT_SECONDS: int = int(os.getenv("LLM_TIMEOUT_SECONDS", "60"))

# Stub mode makes no external calls; the stub reply never parses as a plan, so
# every request falls through to the deterministic assembler.
USE_STUB_LLM: bool = _flag("USE_STUB_LLM", "true")

# ── Destination ───────────────────────────────────────────────────────────────
DESTINATION_NAME: str = os.getenv("DESTINATION_NAME", "Pondicherry")
CURRENCY_SYMBOL: str = os.getenv("CURRENCY_SYMBOL", "₹")

# ── Scheduling (all time values in minutes unless named otherwise) ──────────
DAY_START_HOUR: int = int(os.getenv("DAY_START_HOUR", "9"))
LUNCH_HOUR: int = int(os.getenv("LUNCH_HOUR", "13"))
DINNER_HOUR: int = int(os.getenv("DINNER_HOUR", "19"))

# No coordinates in the datasets: every hop is assumed to be this long.
ASSUMED_INTER_PLACE_DISTANCE_KM: float = float(
    os.getenv("ASSUMED_INTER_PLACE_DISTANCE_KM", "3.0")
)

# ── Data ──────────────────────────────────────────────────────────────────────
# Directory of per-category JSON datasets (<category_key>.json)
PLACE_DATA_DIR: str = os.getenv("PLACE_DATA_DIR", str(Path(__file__).resolve().parent.parent / "data"))

# ── Observability ─────────────────────────────────────────────────────────────
LOGS_DIR: str = os.getenv("LOGS_DIR", str(Path(__file__).resolve().parent.parent / "logs"))
EVENT_LOG_ENABLED: bool = _flag("EVENT_LOG_ENABLED", "false")
