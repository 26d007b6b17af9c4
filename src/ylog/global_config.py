"""Global, project-wide configuration constants.

This module intentionally contains **no business logic** – only simple,
shared filesystem anchors and cross-cutting constants that many modules
can import.
"""

from pathlib import Path

# Core roots
PACKAGE_ROOT: Path = Path(__file__).resolve().parent

# Core Names
PROJECT_NAME = "ylog"
PACKAGE_NAME = "ylog"

# SQL directory (bundled with the package)
SQL_DIR: Path = PACKAGE_ROOT / "sql"

# Database location. The CLI also honours DB_PATH_ENV_VAR.
DEFAULT_DB_DIR: Path = Path.home() / f".{PROJECT_NAME}"
DEFAULT_DB_PATH: Path = DEFAULT_DB_DIR / f"{PROJECT_NAME}.sqlite"
DB_PATH_ENV_VAR = "YLOG_DB_PATH"

# Table owned by the log store
LOGS_TABLE = "logs"
