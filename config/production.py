from .config import Config

LOG_FILE = Config.LOG_FILE
LOG_LEVEL = Config.LOG_LEVEL
LOG_TO_FILE = Config.LOG_TO_FILE

TIMEZONE = Config.TIMEZONE
ITEMS_PER_PAGE = Config.ITEMS_PER_PAGE
