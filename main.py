#!/usr/bin/env python3
"""
GreekPay Payments API - Main Entry Point
"""
import logging

def setup_logging():
    """Configure logging for the application."""
    from greekpay.config import settings
    from greekpay.config.logging_config import setup_production_logging

    setup_production_logging(settings.LOG_DIR)

    # Reduce noise from third-party libraries
    logging.getLogger('uvicorn').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)

def main():
    """Main entry point for the payments API."""
    try:
        from greekpay.api.core.api_config import api_config
        from greekpay.api.core.api_server import app
        import uvicorn

        logger.info(f"Starting {api_config.title}...")
        logger.info(f"Service will be available at: http://{api_config.host}:{api_config.port}")
        logger.info(f"API Documentation: http://{api_config.host}:{api_config.port}/docs")

        uvicorn.run(app, host=api_config.host, port=api_config.port, log_level="info")

    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Error in main: {str(e)}")
        raise

if __name__ == "__main__":
    setup_logging()
    logger = logging.getLogger(__name__)
    main()
