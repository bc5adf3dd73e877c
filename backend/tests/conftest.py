"""Shared test configuration."""

import os

# Settings are read at import time; the suite must not hit the rate limiter.
os.environ["RATE_LIMIT_ENABLED"] = "false"
