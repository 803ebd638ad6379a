"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HALF_SHIFT_HOURS = 4
FULL_DAY_HOURS = 8

LAST_DAYS_WINDOW = 15

DEFAULT_CURRENCY = "MAD"
ISO_DATE_FORMAT = "%Y-%m-%d"

# Stored amounts are JSON numbers; beyond this they no longer survive a float round-trip.
MAX_SIGNIFICANT_DIGITS = 15

EMPLOYEES_KEY = "employees"
CLIENTS_KEY = "clients"
WORK_RECORDS_KEY = "work_records"
SETTINGS_KEY = "app_settings"

STORAGE_KEYS = (EMPLOYEES_KEY, CLIENTS_KEY, WORK_RECORDS_KEY, SETTINGS_KEY)
