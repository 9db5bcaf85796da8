"""
API Configuration Module

This module contains configuration settings for the API layer.
"""

from dataclasses import dataclass
from typing import List
import os
from dotenv import load_dotenv

load_dotenv()

@dataclass
class APIConfig:
    """API configuration settings."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # CORS settings
    allowed_origins: List[str] = None
    allowed_credentials: bool = True
    allowed_methods: List[str] = None
    allowed_headers: List[str] = None

    # API settings
    title: str = "GreekPay Payments API"
    version: str = "1.0.0"
    description: str = "Dues fee quotes and installment previews for GreekPay"

    def __post_init__(self):
        """Initialize default values."""
        if self.allowed_origins is None:
            origins = os.getenv("API_ALLOWED_ORIGINS", "*")
            self.allowed_origins = [o.strip() for o in origins.split(",") if o.strip()]

        if self.allowed_methods is None:
            self.allowed_methods = ["GET", "POST", "OPTIONS"]

        if self.allowed_headers is None:
            self.allowed_headers = ["authorization", "x-client-info", "apikey", "content-type"]

        # Override with environment variables if present
        self.host = os.getenv("API_HOST", self.host)
        self.port = int(os.getenv("API_PORT", str(self.port)))
        self.debug = os.getenv("API_DEBUG", str(self.debug)).lower() == "true"

# Global API configuration instance
api_config = APIConfig()
