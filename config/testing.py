import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEFAULT_STUDENT_ID = "test-student"
DEFAULT_USER_NAME = "Test Student"

ENCOURAGEMENT_MESSAGE = "You are doing well! Keep up the consistency."
