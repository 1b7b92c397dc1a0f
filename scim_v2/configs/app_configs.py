import os

#####
# Logging
#####
# One of: debug, info, notice, warning, error, critical
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")


#####
# Message defaults
#####
# Default "count" for SearchRequest / ListQuery when the caller does not set one
SCIM_DEFAULT_PAGE_SIZE = int(os.environ.get("SCIM_DEFAULT_PAGE_SIZE") or 100)
