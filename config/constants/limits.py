"""
==========================================================
LIMITS, THRESHOLDS & METRICS
==========================================================
Pagination, list sizes, field bounds and thresholds.
Change once here → applies everywhere.
"""

# --- Pagination ---
PAGINATION_DEFAULT = 10
PAGINATION_INBOX = 10            # leads / consultations / inquiries in the admin
PAGINATION_CATALOG_ADMIN = 20

# --- Dashboard ---
DASHBOARD_RECENT_ITEMS = 5

# --- Home page ---
HOME_REVIEWS_LIMIT = 6
HOME_COLLEGES_LIMIT = 6
HOME_UNIVERSITIES_LIMIT = 6

# --- Reviews ---
REVIEW_MIN_RATING = 1
REVIEW_MAX_RATING = 5

# --- Assistant ---
ASSISTANT_MAX_INPUT_LENGTH = 1000
ASSISTANT_HISTORY_LIMIT = 20      # messages kept in the session transcript
ASSISTANT_DEFAULT_MODEL = "gpt-4o-mini"
ASSISTANT_DEFAULT_TEMPERATURE = 0.70
ASSISTANT_DEFAULT_MAX_TOKENS = 600

# --- Requests ---
SLOW_REQUEST_MS = 2000
