import os

LOG_FILE = os.getenv("LOG_FILE", "logs/test.log")
LOG_LEVEL = "WARNING"
LOG_TO_FILE = False

TIMEZONE = os.getenv("TIMEZONE", "Asia/Colombo")
ITEMS_PER_PAGE = 10
