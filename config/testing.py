import os

from .config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
REPORT_DEFAULT_DAYS = 7

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
