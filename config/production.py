import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CHECKIN_GRACE_MINUTES = int(os.getenv("CHECKIN_GRACE_MINUTES", "10"))

AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))
