import os
import logging
import sys

from core.environment import get_env_bool, get_env_int, get_env_list, load_environment

load_environment()

DEBUG = get_env_bool("DEBUG", False)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = get_env_int("PORT", 8000)

# Comma-separated list of origins allowed to call the API
ALLOWED_ORIGINS = get_env_list(
    "ALLOWED_ORIGINS",
    default=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
)


# Logging configuration
def setup_logging():
    """Configure application logging"""
    log_level = logging.DEBUG if DEBUG else logging.INFO

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )

    logger = logging.getLogger('coolcalc')
    logger.setLevel(log_level)

    # Suppress noisy third-party loggers
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

    return logger
