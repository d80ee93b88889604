"""
Signal Service.

Context managers for widget signal blocking, used when the binding layer
pushes controller state into a widget so that the push is never mistaken
for a user edit.
"""

from contextlib import contextmanager
from typing import Any, Optional
from PyQt6.QtWidgets import QWidget
import logging

from smart_form.protocols.widget_protocols import ValueSettable

logger = logging.getLogger(__name__)


class SignalService:
    """
    Service for signal blocking.

    Examples:
        # Block signals (context manager):
        with SignalService.block_signals(combo):
            combo.setCurrentIndex(0)

        # Multiple widgets:
        with SignalService.block_signals(widget1, widget2):
            widget1.set_value(1)
            widget2.set_value(2)

        # Push a controller value into an adapter:
        SignalService.update_widget_value(adapter, field.value)
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: Optional[QWidget]):
        """Context manager for blocking widget signals."""
        blocked = [widget for widget in widgets if widget is not None]
        previous = [widget.blockSignals(True) for widget in blocked]

        try:
            yield
        finally:
            for widget, was_blocked in zip(blocked, previous):
                widget.blockSignals(was_blocked)

    @staticmethod
    def update_widget_value(widget: QWidget, value: Any) -> None:
        """Update widget value with signals blocked."""
        if not isinstance(widget, ValueSettable):
            raise TypeError(f"Cannot update {type(widget).__name__}: it does not implement ValueSettable")
        with SignalService.block_signals(widget):
            widget.set_value(value)
        logger.debug(f"Updated {type(widget).__name__} value to {value!r}")
