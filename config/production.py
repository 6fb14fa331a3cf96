import os

from .config import Config, DB_CONFIG

DB_POOL_SIZE = Config.DB_POOL_SIZE
HOST = Config.HOST
PORT = Config.PORT
REPORT_PERIOD = Config.REPORT_PERIOD
LOG_LEVEL = Config.LOG_LEVEL

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
