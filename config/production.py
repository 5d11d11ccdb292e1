import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DAY_RESET_HOUR = int(os.getenv("DAY_RESET_HOUR", "5"))
WEEK_START_DAY = os.getenv("WEEK_START_DAY", "monday")

REPEATED_START_POLICY = os.getenv("REPEATED_START_POLICY", "last_wins")
DANGLING_START_POLICY = os.getenv("DANGLING_START_POLICY", "status")

STATUS_LOG_LIMIT = int(os.getenv("STATUS_LOG_LIMIT", "50"))
