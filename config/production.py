import os

from .config import Config, db_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False
LOG_LEVEL = Config.LOG_LEVEL
REPORT_DEFAULT_DAYS = Config.REPORT_DEFAULT_DAYS

AUTO_INIT_DB = Config.AUTO_INIT_DB
