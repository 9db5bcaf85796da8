"""
API Core Module

This module contains core API components.
"""

from greekpay.api.core.api_config import api_config, APIConfig
from greekpay.api.core.api_server import app, create_app
from greekpay.api.core.api_middleware import setup_middleware, RequestTimingMiddleware, FeeErrorMiddleware

__all__ = [
    "api_config",
    "APIConfig",
    "app",
    "create_app",
    "setup_middleware",
    "RequestTimingMiddleware",
    "FeeErrorMiddleware"
]
