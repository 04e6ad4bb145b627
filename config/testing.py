import os

from config import env_capacity

DATA_FILE = os.getenv("DATA_FILE", "test_students.dat")

MAX_STUDENTS = env_capacity("MAX_STUDENTS", 100)

REPORT_DIR = os.getenv("REPORT_DIR", "test_reports")
BACKUP_DIR = os.getenv("BACKUP_DIR", "test_backups")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
TESTING = True
