import os

from config.config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DB_CONFIG = Config.db_config()
DB_POOL_SIZE = Config.DB_POOL_SIZE

API_PREFIX = Config.API_PREFIX
CORS_ORIGINS = Config.CORS_ORIGINS
LOG_LEVEL = Config.LOG_LEVEL

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
