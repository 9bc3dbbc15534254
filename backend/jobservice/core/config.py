import os
from typing import Optional

from dotenv import load_dotenv

# Load .env from the repository root
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.abspath(os.path.join(BASE_DIR, "..", ".."))
PROJECT_DIR = os.path.abspath(os.path.join(BACKEND_DIR, ".."))

load_dotenv(os.path.join(PROJECT_DIR, ".env"))

# Fixed USD -> EUR multiplier; stands in for a real exchange-rate source
EUR_CONVERSION_RATE: float = float(os.getenv("EUR_CONVERSION_RATE", "0.85"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
LOG_FILE: Optional[str] = os.getenv("LOG_FILE") or None
