"""
Widget ABC contracts for smart form fields.

Defines the contract an input widget must satisfy to be bound to a
FieldController, in favor of explicit inheritance over duck typing.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for widgets that can accept a value.

    Setting a value programmatically must never be reported as a user edit.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the widget's value.

        Args:
            value: The value to set. None clears the widget.
        """
        pass


class UserEditEmitter(ABC):
    """
    ABC for widgets that report discrete user edits.

    Only user interaction may invoke the callback, exactly once per edit.
    Programmatic value changes must stay silent, which is why Qt's
    ``textChanged``/``currentIndexChanged`` are not suitable sources.
    """

    @abstractmethod
    def connect_user_edit(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the widget's user-edit signal.

        Args:
            callback: Function called with the new value after each user edit.
        """
        pass

    @abstractmethod
    def disconnect_user_edit(self, callback: Callable[[Any], None]) -> None:
        """
        Disconnect a callback previously passed to connect_user_edit.

        Args:
            callback: The callback function to disconnect
        """
        pass


class ErrorDisplayable(ABC):
    """
    ABC for widgets that can surface a field's validation error.
    """

    @abstractmethod
    def set_error_text(self, text: Optional[str]) -> None:
        """
        Show an error message, or clear it.

        Args:
            text: Error message to display. None means no error.
        """
        pass
