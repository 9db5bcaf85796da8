"""
Centralized Logging Configuration

This module provides a production-ready logging system with separate handlers
for different log types so payment problems can be traced after the fact.

Log Categories:
- Payments: File-based, fee and settlement calculations
- Endpoints: File-based, request/response logging
- Errors: File-based, errors only
- General: File-based, application-wide logs
- Console: Warnings and above
"""

import logging
import sys
from datetime import datetime
from pathlib import Path


class ProductionLoggingConfig:
    """Production-ready logging configuration with separated log streams."""

    def __init__(self, log_dir: str = "logs"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d")
        self.log_files = {
            'payments': self.log_dir / f"payments_{timestamp}.log",
            'endpoints': self.log_dir / f"endpoints_{timestamp}.log",
            'errors': self.log_dir / f"errors_{timestamp}.log",
            'general': self.log_dir / f"greekpay_{timestamp}.log"
        }

        self._setup_loggers()

    def _setup_loggers(self):
        """Set up all logger configurations."""
        logging.getLogger().handlers.clear()

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)

        self._create_formatters()
        self._setup_handlers()
        self._configure_specific_loggers()

    def _create_formatters(self):
        """Create formatters for different log types."""
        # Detailed formatter for files
        self.file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Simple formatter for console
        self.console_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

    def _setup_handlers(self):
        """Set up file and console handlers."""
        general_handler = logging.FileHandler(self.log_files['general'], encoding='utf-8')
        general_handler.setLevel(logging.INFO)
        general_handler.setFormatter(self.file_formatter)

        endpoint_handler = logging.FileHandler(self.log_files['endpoints'], encoding='utf-8')
        endpoint_handler.setLevel(logging.INFO)
        endpoint_handler.setFormatter(self.file_formatter)

        # Fee math logs at DEBUG, keep it in its own file
        payments_handler = logging.FileHandler(self.log_files['payments'], encoding='utf-8')
        payments_handler.setLevel(logging.DEBUG)
        payments_handler.setFormatter(self.file_formatter)

        error_handler = logging.FileHandler(self.log_files['errors'], encoding='utf-8')
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(self.file_formatter)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(self.console_formatter)

        self.handlers = {
            'general': general_handler,
            'endpoints': endpoint_handler,
            'payments': payments_handler,
            'errors': error_handler,
            'console': console_handler
        }

    def _configure_specific_loggers(self):
        """Configure specific loggers with appropriate handlers."""
        payment_loggers = [
            'greekpay.payments',
            'greekpay.payments.fees',
        ]

        for logger_name in payment_loggers:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.DEBUG)
            logger.addHandler(self.handlers['payments'])
            logger.addHandler(self.handlers['errors'])
            logger.addHandler(self.handlers['console'])
            logger.propagate = False

        endpoint_loggers = [
            'greekpay.api',
        ]

        for logger_name in endpoint_loggers:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.INFO)
            logger.addHandler(self.handlers['endpoints'])
            logger.addHandler(self.handlers['errors'])
            logger.addHandler(self.handlers['console'])
            logger.propagate = False

        general_loggers = [
            'greekpay',
            '__main__'
        ]

        for logger_name in general_loggers:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.INFO)
            logger.addHandler(self.handlers['general'])
            logger.addHandler(self.handlers['console'])
            logger.propagate = False


def setup_production_logging(log_dir: str = "logs") -> ProductionLoggingConfig:
    """Set up production logging configuration."""
    return ProductionLoggingConfig(log_dir)


def get_endpoint_logger() -> logging.Logger:
    """Get logger specifically for endpoints."""
    return logging.getLogger('greekpay.api')


def log_endpoint_request(method: str, endpoint: str, status: int, duration: float):
    """Log endpoint requests with consistent formatting."""
    get_endpoint_logger().info(f"[{method}] {endpoint} - {status} - {duration:.3f}s")
