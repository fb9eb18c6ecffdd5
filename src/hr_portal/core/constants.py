"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_THRESHOLD_HOUR = 9
DEFAULT_LATE_THRESHOLD_MINUTE = 15
DEFAULT_AUTO_CHECKOUT_HOUR = 0
DEFAULT_AUTO_CHECKOUT_MINUTE = 0

# Checking out after this many hours asks for a late-checkout reason.
EXTENDED_HOURS_THRESHOLD = 9

NOT_CHECKED_OUT = "Not checked out"

ANNUAL_LEAVE_ALLOWANCE = 12
AUTO_DEDUCT_REASON = "Auto-deducted for absence"

MIN_PASSWORD_LENGTH = 6

MAX_DOCUMENT_SIZE = 10 * 1024 * 1024
ALLOWED_DOCUMENT_TYPES = frozenset(
    {
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "image/webp",
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/vnd.ms-excel",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "application/vnd.ms-powerpoint",
        "application/vnd.openxmlformats-officedocument.presentationml.presentation",
        "text/plain",
        "text/csv",
        "application/zip",
        "application/x-zip-compressed",
    }
)
