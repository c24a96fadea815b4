from config.config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

DATA_SOURCE = "mock"
EMPLOYEE_REGISTRY = "json"
MOCK_SEED = 1234

AUTO_INIT_DB = False
