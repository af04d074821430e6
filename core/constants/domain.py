"""Domain constants for matching, eligibility and fan-out."""

# Minimum days between two whole-blood donations
DONATION_CYCLE_DAYS = 56

# Reminder job catch window: notify when DONATION_CYCLE_DAYS <= days <= this
ELIGIBILITY_REMINDER_MAX_DAYS = DONATION_CYCLE_DAYS + 1

MIN_UNITS = 1
MAX_UNITS = 10
DEFAULT_UNITS = 1

MAX_NOTES_LENGTH = 500

# Sliding window for emergency broadcasts per seeker
EMERGENCY_BROADCAST_WINDOW_MINUTES = 60

# Upper bound on donors notified for a single request
MAX_FANOUT_RECIPIENTS = 100

HOME_FEED_LIMIT = 10
INBOX_LIMIT = 50
DONOR_SEARCH_LIMIT = 50
NEARBY_DONOR_LIMIT = 50
NEARBY_DONOR_DEFAULT_DISTANCE_METERS = 50_000
NEARBY_CENTER_LIMIT = 20

# Sentinel attribute values in the geospatial index
GEO_UNKNOWN_BLOOD_TYPE = "unknown"
GEO_NO_BLOOD_TYPE = ""
GEO_NO_CITY = ""
