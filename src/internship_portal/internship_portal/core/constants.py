"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEPARTMENTS = (
    "Human Resources",
    "Marketing",
    "Web Development",
    "UI/UX Design",
    "Data Science",
    "Finance",
    "Cyber Security",
    "Operations",
    "Other",
)

# Internship duration label -> months
DURATION_MONTHS = {
    "1 Month": 1,
    "3 Months": 3,
    "4 Months": 4,
    "6 Months": 6,
}

MIN_LEAVE_REASON_LENGTH = 10
MAX_RATING = 10
RATING_DECIMAL_PLACES = 2
DEFAULT_PAGE_SIZE = 10
DEFAULT_LIST_LIMIT = 500
UNIQUE_ID_PREFIX = "INT"
