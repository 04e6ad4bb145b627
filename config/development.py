import os

from config import env_capacity

DATA_FILE = os.getenv("DATA_FILE", "students.dat")

MAX_STUDENTS = env_capacity("MAX_STUDENTS", 100)

REPORT_DIR = os.getenv("REPORT_DIR", "reports")
BACKUP_DIR = os.getenv("BACKUP_DIR", "backups")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
