import os


class Config:
    LOG_FILE = os.environ.get("LOG_FILE", "logs/app.log")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    # Mirror application log records into LOG_FILE
    LOG_TO_FILE = bool(int(os.environ.get("LOG_TO_FILE", "0")))

    TIMEZONE = os.environ.get("TIMEZONE", "Asia/Colombo")
    ITEMS_PER_PAGE = int(os.environ.get("ITEMS_PER_PAGE", "10"))
