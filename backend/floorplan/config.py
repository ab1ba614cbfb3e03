"""Application configuration via environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Runtime
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# CORS
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")

# Raise instead of logging when a generated plan fails its geometry checks
STRICT_GEOMETRY = os.getenv("FLOORPLAN_STRICT_GEOMETRY", "false").lower() == "true"
