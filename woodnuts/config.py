"""
Configuration - Environment-driven settings.

WOODNUTS_ENV              deployment name (default "development")
ALLOWED_ORIGINS           comma-separated CORS origins (default "*")
WOODNUTS_LOG_LEVEL        logging level name (default "INFO")
WOODNUTS_SESSION_MAX_AGE  idle seconds before a session is dropped (default 3600)
"""

import os


WOODNUTS_ENV = os.getenv("WOODNUTS_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")
LOG_LEVEL = os.getenv("WOODNUTS_LOG_LEVEL", "INFO").upper()
SESSION_MAX_AGE = int(os.getenv("WOODNUTS_SESSION_MAX_AGE", "3600"))
