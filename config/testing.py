from .config import Config

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "youthsync_test",
}
DB_POOL_SIZE = 1
HOST = Config.HOST
PORT = Config.PORT
REPORT_PERIOD = "day"
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
