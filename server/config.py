# server/config.py

import os
import logging
from dotenv import load_dotenv


load_dotenv()

logger = logging.getLogger(__name__)


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./data/kanban.db")

SECRET_KEY = os.getenv("JWT_SECRET_KEY", "")
ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24 * 30)))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Only a local dev setup may run without a real signing key
DEV_MODE = os.getenv("KANBAN_DEV_MODE", "").lower() in ("1", "true", "yes")

if not SECRET_KEY and DEV_MODE:
    logger.warning("JWT_SECRET_KEY is not set, falling back to an insecure development key")
    SECRET_KEY = "dev-insecure-secret"


def check_secret():
    if not SECRET_KEY:
        raise RuntimeError("JWT_SECRET_KEY must be set (or KANBAN_DEV_MODE=1 for local development)")
