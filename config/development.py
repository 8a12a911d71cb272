import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Minutes after a class slot starts before a check-in counts as late
CHECKIN_GRACE_MINUTES = int(os.getenv("CHECKIN_GRACE_MINUTES", "10"))

# Seed a demo teacher, class and students on startup
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))
