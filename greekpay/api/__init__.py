"""
API Layer Module

This module provides the HTTP API for GreekPay fee quotes.
"""

from greekpay.api.core.api_server import app
from greekpay.api.core.api_config import api_config

__all__ = [
    "app",
    "api_config"
]
