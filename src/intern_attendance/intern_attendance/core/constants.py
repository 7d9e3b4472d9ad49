"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_ITEMS_PER_PAGE = 10
DEFAULT_TIMEZONE = "Asia/Colombo"
DEFAULT_LOG_FILE = "logs/app.log"
NOT_MARKED_LABEL = "Not Marked"
