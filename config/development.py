import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Student shown when the client does not pass ?student_id= / ?name=
DEFAULT_STUDENT_ID = os.getenv("DEFAULT_STUDENT_ID", "demo")
DEFAULT_USER_NAME = os.getenv("DEFAULT_USER_NAME", "yehia")

ENCOURAGEMENT_MESSAGE = os.getenv("ENCOURAGEMENT_MESSAGE", "You are doing well! Keep up the consistency.")
