import os
import subprocess
import sys
from pathlib import Path

from sqlalchemy.engine import make_url

STANDALONE_DATABASE_URL = "sqlite+pysqlite:////data/classboard.db"


def _env_default(name: str, value: str) -> None:
    current = os.environ.get(name)
    if current is None or current.strip() == "":
        os.environ[name] = value


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _prepare_environment() -> None:
    _env_default("APP_PORT", "8000")
    _env_default("DATABASE_URL", STANDALONE_DATABASE_URL)
    _env_default("STORE_BACKEND", "sql")
    _env_default("BOOTSTRAP_TEACHER_EMAIL", "professor@example.com")
    _env_default("BOOTSTRAP_TEACHER_PASSWORD", "professor123")
    _env_default("SEED_DEMO_DATA", "false")
    _env_default("STANDALONE_ALLOW_EXTERNAL_DB", "false")

    if _is_truthy(os.environ["STANDALONE_ALLOW_EXTERNAL_DB"]):
        return

    try:
        parsed_db = make_url(os.environ["DATABASE_URL"])
    except Exception:
        return

    is_postgres = parsed_db.drivername.startswith("postgres")
    is_localhost = parsed_db.host in {"localhost", "127.0.0.1", "::1"}
    if is_postgres and is_localhost:
        print(
            f"Detected localhost Postgres URL in standalone mode; switching DATABASE_URL to {STANDALONE_DATABASE_URL}. "
            "Set STANDALONE_ALLOW_EXTERNAL_DB=true to keep external DB URL.",
            flush=True,
        )
        os.environ["DATABASE_URL"] = STANDALONE_DATABASE_URL


def _ensure_database_dir() -> None:
    try:
        parsed_url = make_url(os.environ["DATABASE_URL"])
    except Exception:
        return

    if not parsed_url.drivername.startswith("sqlite"):
        return

    db_path = parsed_url.database
    if not db_path or db_path == ":memory:":
        return

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def _run(cmd: list[str]) -> None:
    print(">", " ".join(cmd), flush=True)
    subprocess.run(cmd, check=True)


def main() -> None:
    _prepare_environment()
    _ensure_database_dir()

    print("Starting standalone Classboard backend with:", flush=True)
    print(f"  DATABASE_URL={os.environ['DATABASE_URL']}", flush=True)
    print(f"  STORE_BACKEND={os.environ['STORE_BACKEND']}", flush=True)

    _run([sys.executable, "-m", "alembic", "upgrade", "head"])
    _run(
        [
            sys.executable,
            "scripts/seed_teacher.py",
            "--email",
            os.environ["BOOTSTRAP_TEACHER_EMAIL"],
            "--password",
            os.environ["BOOTSTRAP_TEACHER_PASSWORD"],
        ]
    )
    if _is_truthy(os.environ["SEED_DEMO_DATA"]):
        _run([sys.executable, "scripts/seed_demo_data.py"])

    os.execvp(
        "uvicorn",
        [
            "uvicorn",
            "classboard.main:app",
            "--host",
            "0.0.0.0",
            "--port",
            os.environ["APP_PORT"],
        ],
    )


if __name__ == "__main__":
    main()
