"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

EMPLOYEE_ID_MIN = 1_000_000
EMPLOYEE_ID_MAX = 9_999_999
PIN_MIN = 1000
PIN_MAX = 9999
UNSET_PIN = 0

MASKED_ID = "*******"

EMPLOYEE_FIELD_SEPARATOR = "|"
EMPLOYEE_FIELD_COUNT = 7
PUNCH_FIELD_SEPARATOR = "--"
PUNCH_FIELD_COUNT = 4

DEFAULT_EMPLOYEES_FILE = "employees.txt"
DEFAULT_PUNCH_RECORDS_FILE = "punchRecords.txt"
TIMESTAMP_FORMAT = "%m/%d/%y %H:%M:%S"
