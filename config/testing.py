SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DAY_RESET_HOUR = 5
WEEK_START_DAY = "monday"

REPEATED_START_POLICY = "last_wins"
DANGLING_START_POLICY = "status"

STATUS_LOG_LIMIT = 50
