import os

from .config import Config

LOG_FILE = Config.LOG_FILE
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
LOG_TO_FILE = True

TIMEZONE = Config.TIMEZONE
ITEMS_PER_PAGE = Config.ITEMS_PER_PAGE
