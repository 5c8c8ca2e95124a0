import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_STUDENT_ID = os.getenv("DEFAULT_STUDENT_ID", "demo")
DEFAULT_USER_NAME = os.getenv("DEFAULT_USER_NAME", "Student")

ENCOURAGEMENT_MESSAGE = os.getenv("ENCOURAGEMENT_MESSAGE", "You are doing well! Keep up the consistency.")
