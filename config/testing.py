import os

DATA_DIR = os.getenv("PUNCH_CLOCK_DATA_DIR", "test-data")
EMPLOYEES_FILE = "employees.txt"
PUNCH_RECORDS_FILE = "punchRecords.txt"

DEBUG = False
TESTING = True

SEED_ON_EMPTY = True

LOG_LEVEL = "DEBUG"
LOG_FILE = ""
