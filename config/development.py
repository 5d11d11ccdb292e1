import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Logical day starts at this UTC hour instead of midnight
DAY_RESET_HOUR = int(os.getenv("DAY_RESET_HOUR", "5"))
WEEK_START_DAY = os.getenv("WEEK_START_DAY", "monday")

# last_wins | first_wins
REPEATED_START_POLICY = os.getenv("REPEATED_START_POLICY", "last_wins")
# status | always | discard
DANGLING_START_POLICY = os.getenv("DANGLING_START_POLICY", "status")

STATUS_LOG_LIMIT = int(os.getenv("STATUS_LOG_LIMIT", "50"))
