import os

from config.config import Config

SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = Config.db_config()
DB_POOL_SIZE = Config.DB_POOL_SIZE

API_PREFIX = Config.API_PREFIX
CORS_ORIGINS = Config.CORS_ORIGINS
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, the app applies database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
