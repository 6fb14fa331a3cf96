import os

from .config import Config, DB_CONFIG

DB_POOL_SIZE = Config.DB_POOL_SIZE
HOST = Config.HOST
PORT = Config.PORT
REPORT_PERIOD = Config.REPORT_PERIOD
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
