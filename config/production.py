import os

DATA_DIR = os.getenv("PUNCH_CLOCK_DATA_DIR", "/var/lib/punch-clock")
EMPLOYEES_FILE = os.getenv("EMPLOYEES_FILE", "employees.txt")
PUNCH_RECORDS_FILE = os.getenv("PUNCH_RECORDS_FILE", "punchRecords.txt")

DEBUG = False

SEED_ON_EMPTY = bool(int(os.getenv("SEED_ON_EMPTY", "0")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("LOG_FILE", os.path.join(DATA_DIR, "punch_clock.log"))
