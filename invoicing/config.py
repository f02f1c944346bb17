# invoicing/config.py
"""
Process-wide settings, read once from the environment at import time.
"""

import os

DB_URL = os.environ.get("INVOICING_DB_URL", "sqlite:///db.sqlite")

# "today" for new invoices is resolved in this zone, not the server's
TIMEZONE = os.environ.get("INVOICING_TIMEZONE", "America/New_York")

LOG_LEVEL = os.environ.get("INVOICING_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

DASHBOARD_PATH = "/dashboard"
INVOICES_PATH = "/dashboard/invoices"
