SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

CHECKIN_GRACE_MINUTES = 10

AUTO_SEED = False
