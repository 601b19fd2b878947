"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Days before an expiry date at which a status turns from ok to warning.
EXPIRY_WARNING_DAYS = 30

DEFAULT_COMPANY_NAME = "SOMYL S.A."
DEFAULT_NATIONALITY = "Chilena"
DEFAULT_REVIEW_PERIOD = "2026-Q1"
DEFAULT_RECENT_LOGS = 5

STORAGE_BUCKET = "rrhh-files"
STORAGE_PREFIX = "somyl_rrhh"
KIOSK_LOGIN_DOMAIN = "sistema.local"

DEFAULT_MIN_WAGE = 500000.0
DEFAULT_TOP_LIMIT_AFP = 84.3
DEFAULT_TOP_LIMIT_CESANTIA = 126.6

NATIONALITIES = (
    "Chilena",
    "Venezolana",
    "Colombiana",
    "Peruana",
    "Haitiana",
    "Boliviana",
    "Argentina",
    "Ecuatoriana",
    "Brasileña",
    "Otra",
)
