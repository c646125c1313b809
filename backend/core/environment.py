"""Environment settings for the cooling-load calculator service.

The service reads four variables: DEBUG (verbose logs and tracebacks in
500 responses), HOST and PORT (uvicorn bind address) and ALLOWED_ORIGINS
(comma-separated CORS origins). app/config.py turns them into settings.

.env is read first and .env.local second, so local overrides win over the
committed defaults. Both override variables already set in the process.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_FILES = (".env", ".env.local")

TRUE_VALUES = ("true", "1", "yes", "on")
FALSE_VALUES = ("false", "0", "no", "off")


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """Load the calculator's .env files from env_dir (default: working directory).

    Returns the names of the files that were found and loaded.
    """
    env_dir = Path(env_dir) if env_dir is not None else Path.cwd()

    loaded = []
    for name in ENV_FILES:
        env_file = env_dir / name
        if env_file.exists():
            load_dotenv(env_file, override=True)
            loaded.append(name)

    if loaded:
        logger.info(f"Calculator settings loaded from: {', '.join(loaded)}")
    else:
        logger.debug(f"No .env files in {env_dir}, using process environment")
    return loaded


def get_env_bool(key: str, default: bool = False) -> bool:
    """Read a flag such as DEBUG; unrecognized values fall back to default"""
    value = os.getenv(key, "").strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def get_env_int(key: str, default: int = 0) -> int:
    """Read an integer such as PORT, warning and falling back on bad values"""
    raw = os.getenv(key)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"{key}={raw!r} is not an integer, using {default}")
        return default


def get_env_list(key: str, separator: str = ",", default: Optional[List[str]] = None) -> List[str]:
    """Read a separated list such as ALLOWED_ORIGINS, dropping blank entries"""
    value = os.getenv(key, "")
    if not value.strip():
        return list(default) if default is not None else []
    return [item.strip() for item in value.split(separator) if item.strip()]
