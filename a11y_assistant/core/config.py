"""
Configuration
=============
Loads environment variables from .env file using python-dotenv.

Environment Variables:
    LOG_LEVEL            — Root log level (default: INFO)
    LOG_DIR              — Directory for the daily log file (default: logs)
    ISSUE_CATALOG_PATH   — Optional YAML issue catalog replacing the built-in one
    ORDERING_STRATEGY    — Catalog shuffle strategy: keyed | comparison (default: keyed)
    DEFAULT_SCAN_TARGET  — URL scanned when the request URL is blank
    CORS_ORIGINS         — Comma separated list of allowed frontend origins

Ordering Strategy:
    "keyed" draws one sort key per template. "comparison" replays the
    comparator-driven shuffle of the first browser build so reports match
    it draw for draw. Switching strategies changes every report, so pick one
    per deployment and keep it.
"""
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")

ISSUE_CATALOG_PATH = os.getenv("ISSUE_CATALOG_PATH") or None
ORDERING_STRATEGY = os.getenv("ORDERING_STRATEGY", "keyed").lower()

DEFAULT_SCAN_TARGET = os.getenv("DEFAULT_SCAN_TARGET", "https://example.com")

CORS_ORIGINS: list[str] = [
    origin.strip()
    for origin in os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000",
    ).split(",")
    if origin.strip()
]
