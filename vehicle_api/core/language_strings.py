"""Language Strings - centralized locale-specific text for caller-facing envelopes.

Invariants:
    - All strings are pure data (no IO, no computation)
    - Every MessageKey has an entry in every Locale
    - Hebrew is the service default; English is opt-in via MESSAGE_LOCALE
"""

from enum import Enum

from vehicle_api.core.domain_types import Locale


class MessageKey(str, Enum):
    """Identifies one caller-facing message."""
    INVALID_PLATE = "invalid_plate"
    NOT_FOUND = "not_found"
    API_ERROR = "api_error"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    UPSTREAM_ERROR = "upstream_error"
    NO_RESPONSE = "no_response"
    INTERNAL_ERROR = "internal_error"


_MESSAGES: dict[Locale, dict[MessageKey, str]] = {
    Locale.HE: {
        MessageKey.INVALID_PLATE: "מספר רישוי לא תקין. נדרש 7-8 ספרות",
        MessageKey.NOT_FOUND: "לא נמצאו נתונים עבור מספר רישוי זה במאגר",
        MessageKey.API_ERROR: "שגיאה בתגובה מהמאגר הממשלתי",
        MessageKey.UPSTREAM_TIMEOUT: "חיבור למאגר הממשלתי נכשל (timeout)",
        MessageKey.UPSTREAM_ERROR: "שגיאה בחיבור למאגר הממשלתי",
        MessageKey.NO_RESPONSE: "לא התקבלה תגובה מהמאגר הממשלתי",
        MessageKey.INTERNAL_ERROR: "שגיאה פנימית בשרת",
    },
    Locale.EN: {
        MessageKey.INVALID_PLATE: "Invalid plate number. 7-8 digits required",
        MessageKey.NOT_FOUND: "No vehicle found for this plate number",
        MessageKey.API_ERROR: "The government registry returned an error",
        MessageKey.UPSTREAM_TIMEOUT: "Connection to the government registry timed out",
        MessageKey.UPSTREAM_ERROR: "Error connecting to the government registry",
        MessageKey.NO_RESPONSE: "No response from the government registry",
        MessageKey.INTERNAL_ERROR: "Internal server error",
    },
}


def get_message(key: MessageKey, locale: Locale = Locale.HE) -> str:
    """Get the caller-facing text for key in locale."""
    return _MESSAGES[locale][key]
