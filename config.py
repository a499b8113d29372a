"""
Configuration constants for the graph algorithm service.

Every setting can be overridden through an environment variable.
Secrets are never hardcoded: without GRAPHCORE_SECRET_KEY a random
session key is generated per process.
"""

import os
import secrets

# =============================================================================
# Server Configuration
# =============================================================================

HOST = os.environ.get("GRAPHCORE_HOST", "127.0.0.1")
PORT = int(os.environ.get("GRAPHCORE_PORT", "5000"))

# Flask debug mode (reloader + interactive tracebacks); never on in production
DEBUG = os.environ.get("GRAPHCORE_DEBUG", "0").lower() in ("1", "true", "yes")

# Signs the session cookie that holds the current graph
SECRET_KEY = os.environ.get("GRAPHCORE_SECRET_KEY") or secrets.token_hex(32)

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
