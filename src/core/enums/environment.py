"""Deployment environment, read from the ENVIRONMENT setting.

Only DEVELOPMENT switches the console renderer to colored key/value
output and exposes /config; every other value logs JSON.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the dashboard API is running."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
