"""
utils/constants.py

Purpose: Centralized static values

- Collection names
- Role and guide status values written by the API
- Home page banner

(Prevents hardcoding across the codebase)
"""

# ============================================================
# COLLECTIONS
# ============================================================

USERS_COLLECTION = "users"
TOURS_COLLECTION = "tours"
BOOKINGS_COLLECTION = "bookings"
TOUR_GUIDES_COLLECTION = "tour_guides"
STORIES_COLLECTION = "stories"

ALL_COLLECTIONS = (
    USERS_COLLECTION,
    TOURS_COLLECTION,
    BOOKINGS_COLLECTION,
    TOUR_GUIDES_COLLECTION,
    STORIES_COLLECTION,
)

# ============================================================
# ROLES & GUIDE STATUS
# ============================================================

TOUR_GUIDE_ROLE = "Tour Guide"

GUIDE_STATUS_ACCEPTED = "accepted"
GUIDE_STATUS_REJECTED = "rejected"

# ============================================================
# FIELDS
# ============================================================

TOUR_PRICE_FIELD = "tour.price"

# ============================================================
# HOME
# ============================================================

HOME_BANNER = (
    '<h1 style="font-family: sans-serif; text-align: center;">'
    "TourNext is travelling with streamlined guide</h1>"
)
