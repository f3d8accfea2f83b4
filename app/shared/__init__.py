"""Shared utilities: telemetry (logging) and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.telemetry import get_logger, setup_logging
from app.shared.utils import ensure_utc, utc_now

__all__ = [
    "ensure_utc",
    "get_logger",
    "setup_logging",
    "utc_now",
]
