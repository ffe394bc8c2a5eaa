"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALLOWED_EXTENSIONS = frozenset({"xls", "xlsx"})

MIN_GRID_ROWS = 2
METADATA_SCAN_ROWS = 100
DEFAULT_MONTH = "Unknown"

MONTH_LABELS = frozenset({"month", "month:"})
YEAR_LABELS = frozenset({"year", "year:"})
PRESENT_LABEL = "p"
ABSENT_LABEL = "a"
TOTAL_AMOUNT_PHRASE = "total amount"

# Calendar rank used when sorting sheet listings. Lookup is exact; unknown labels rank 0.
MONTH_ORDER = {
    "January": 1,
    "February": 2,
    "March": 3,
    "April": 4,
    "May": 5,
    "June": 6,
    "July": 7,
    "August": 8,
    "September": 9,
    "October": 10,
    "November": 11,
    "December": 12,
}

DEFAULT_SESSION_DAYS = 7
