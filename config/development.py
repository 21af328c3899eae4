import os

DATA_DIR = os.getenv("PUNCH_CLOCK_DATA_DIR", ".")
EMPLOYEES_FILE = os.getenv("EMPLOYEES_FILE", "employees.txt")
PUNCH_RECORDS_FILE = os.getenv("PUNCH_RECORDS_FILE", "punchRecords.txt")

DEBUG = True

# Write the five sample employees when employees.txt is missing or empty
SEED_ON_EMPTY = bool(int(os.getenv("SEED_ON_EMPTY", "1")))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
# Logs go to a file so they do not interleave with the terminal prompts
LOG_FILE = os.getenv("LOG_FILE", os.path.join(DATA_DIR, "punch_clock.log"))
