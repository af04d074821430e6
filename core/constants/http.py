"""HTTP-level constants."""

REQUEST_ID_HEADER = "X-Request-ID"

# Scope granting access to maintenance endpoints (resync, seeding, job triggers)
ADMIN_SCOPE = "bloodmatch:admin"
