import os

from config.config import *  # noqa: F401,F403
from config.config import env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

DATA_SOURCE = os.getenv("DATA_SOURCE", "database")
EMPLOYEE_REGISTRY = os.getenv("EMPLOYEE_REGISTRY", "database")

AUTO_INIT_DB = env_bool("AUTO_INIT_DB", "0")
