import logging
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_VARS = ("IPROMPT_DATA_ROOT", "IPROMPT_FRONTEND", "IPROMPT_LOG_LEVEL")


def find_env_file(env_path: str | None = None) -> Optional[Path]:
    """Explicit path, else ./.env, else the .env next to main.py."""
    if env_path:
        p = Path(env_path)
        return p if p.exists() else None
    for p in (Path.cwd() / ".env", PROJECT_ROOT / ".env"):
        if p.exists():
            return p
    return None


def load_config(env_path: str | None = None) -> Optional[Path]:
    env_file = find_env_file(env_path)
    if env_file is None:
        logging.warning("No '.env' found – using defaults for %s.", ", ".join(ENV_VARS))
        return None
    # already-set environment variables win over the file
    load_dotenv(dotenv_path=env_file, override=False)
    logging.info("Configuration loaded from %s.", env_file)
    return env_file
