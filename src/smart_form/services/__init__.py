"""
Service layer for form widgets.
"""

from .signal_service import SignalService

__all__ = [
    "SignalService",
]
