"""
ShipDB - Centralised configuration.

All tunables live here.  Every other module imports from config
instead of reading os.environ directly.
"""

from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or unusable."""


# ── Paths ──────────────────────────────────────────────────────────────
BASE_DIR       = Path(__file__).resolve().parent
TEMPLATES_DIR  = BASE_DIR / "templates"
STATIC_DIR     = BASE_DIR / "static"
CSV_SEED_PATH  = os.environ.get("SHIPDB_CSV_SEED", "")

# ── Database ───────────────────────────────────────────────────────────
# Either a full SQLAlchemy URL, or the six connection variables below.
DB_URL_ENV = "SHIPDB_DB_URL"
DB_ENV_VARS = (
    "DB_USERNAME", "DB_PASSWORD", "SERVER_HOST",
    "DB_PORT", "DB_NAME", "DB_SSLMODE",
)

# ── Server ─────────────────────────────────────────────────────────────
HOST      = os.environ.get("SHIPDB_HOST", "0.0.0.0")
PORT      = int(os.environ.get("SHIPDB_PORT", "8080"))
DEBUG     = os.environ.get("SHIPDB_DEBUG", "0") == "1"
SECRET    = os.environ.get("SHIPDB_SECRET", "shipdb-dev-key-change-in-prod")
LOG_LEVEL = os.environ.get("SHIPDB_LOG_LEVEL", "INFO").upper()

# ── Upload / CSV ───────────────────────────────────────────────────────
MAX_UPLOAD_BYTES   = 10 << 20
ALLOWED_EXTENSIONS = frozenset({".csv"})
CSV_DELIMITER      = os.environ.get("SHIPDB_CSV_DELIMITER", ",")   # "," ";" or "auto"
TIMESTAMP_FORMAT   = os.environ.get("SHIPDB_TIMESTAMP_FORMAT", "%Y-%m-%d %H:%M")

# ── Pagination ─────────────────────────────────────────────────────────
API_MAX_LIMIT     = 1000
API_DEFAULT_LIMIT = 100


def database_url() -> str | URL:
    """
    Resolve the database URL from the environment.

    SHIPDB_DB_URL wins when set.  Otherwise every variable in DB_ENV_VARS
    must be present; a PostgreSQL URL is built from them.
    """
    explicit = os.environ.get(DB_URL_ENV, "").strip()
    if explicit:
        return explicit

    values = {name: os.environ.get(name, "").strip() for name in DB_ENV_VARS}
    missing = [name for name, val in values.items() if not val]
    if missing:
        raise ConfigError(
            "missing required database environment variables: "
            + ", ".join(missing)
        )

    try:
        port = int(values["DB_PORT"])
    except ValueError:
        raise ConfigError(f"DB_PORT must be an integer, got {values['DB_PORT']!r}")

    return URL.create(
        "postgresql+psycopg2",
        username=values["DB_USERNAME"],
        password=values["DB_PASSWORD"],
        host=values["SERVER_HOST"],
        port=port,
        database=values["DB_NAME"],
        query={"sslmode": values["DB_SSLMODE"]},
    )


def validate() -> None:
    """Check the CSV tunables once at startup; raises ConfigError."""
    if CSV_DELIMITER not in (",", ";", "auto"):
        raise ConfigError(
            f"SHIPDB_CSV_DELIMITER must be ',', ';' or 'auto', got {CSV_DELIMITER!r}"
        )
    if "%" not in TIMESTAMP_FORMAT:
        raise ConfigError(
            f"SHIPDB_TIMESTAMP_FORMAT has no strftime directives: {TIMESTAMP_FORMAT!r}"
        )
