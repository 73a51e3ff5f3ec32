"""
Shared utilities package.

This package contains logging configuration and the HTTP session factory
used by the upstream API clients.
"""

from app.utils.logging_config import setup_logging, configure_api_logging
from app.utils.http import create_session

__all__ = ['setup_logging', 'configure_api_logging', 'create_session']
