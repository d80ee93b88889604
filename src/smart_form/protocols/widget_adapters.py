"""
Widget adapters that wrap Qt widgets to implement the smart form ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QComboBox.currentData()
- QLineEdit.setText() vs QComboBox.setCurrentIndex()
- QLineEdit.textEdited vs QComboBox.activated for user edits

All adapters implement consistent interface via ABCs:
- get_value() / set_value() for all input widgets
- connect_user_edit() for all input widgets
- set_error_text() for error indicators
"""

from typing import Any, Callable, Dict, Optional
from abc import ABCMeta

from PyQt6.QtWidgets import QLineEdit, QComboBox, QLabel
from PyQt6.QtCore import QObject

from .widget_protocols import ValueGettable, ValueSettable, UserEditEmitter, ErrorDisplayable


# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class LineEditAdapter(QLineEdit, ValueGettable, ValueSettable, UserEditEmitter,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit implementing the smart form ABCs.

    Values are the raw text: an empty line edit yields "" so validators see
    exactly what the user typed.
    """

    _widget_id = "line_edit"

    def __init__(self, parent=None):
        super().__init__(parent)
        self._user_edit_slots: Dict[Callable[[Any], None], Callable[[str], None]] = {}

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        text = "" if value is None else str(value)
        if text != self.text():
            self.setText(text)

    def connect_user_edit(self, callback: Callable[[Any], None]) -> None:
        """Implement UserEditEmitter ABC."""
        # textEdited is not emitted by setText()
        slot = lambda text: callback(text)
        self._user_edit_slots[callback] = slot
        self.textEdited.connect(slot)

    def disconnect_user_edit(self, callback: Callable[[Any], None]) -> None:
        """Implement UserEditEmitter ABC."""
        slot = self._user_edit_slots.pop(callback, None)
        if slot is not None:
            self.textEdited.disconnect(slot)


class ComboBoxAdapter(QComboBox, ValueGettable, ValueSettable, UserEditEmitter,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox implementing the smart form ABCs.

    Stores actual values in itemData, not just display text.
    """

    _widget_id = "combo_box"

    def __init__(self, parent=None):
        super().__init__(parent)
        self._user_edit_slots: Dict[Callable[[Any], None], Callable[[int], None]] = {}

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        # Find index of item with matching data
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def connect_user_edit(self, callback: Callable[[Any], None]) -> None:
        """Implement UserEditEmitter ABC."""
        # activated fires on user selection only, unlike currentIndexChanged
        slot = lambda index: callback(self.itemData(index))
        self._user_edit_slots[callback] = slot
        self.activated.connect(slot)

    def disconnect_user_edit(self, callback: Callable[[Any], None]) -> None:
        """Implement UserEditEmitter ABC."""
        slot = self._user_edit_slots.pop(callback, None)
        if slot is not None:
            self.activated.disconnect(slot)


class ErrorLabelAdapter(QLabel, ErrorDisplayable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLabel implementing ErrorDisplayable.

    Optionally hidden while there is nothing to show.
    """

    _widget_id = "error_label"

    def __init__(self, parent=None, hide_when_empty: bool = True):
        super().__init__(parent)
        self._hide_when_empty = hide_when_empty
        self.setVisible(not hide_when_empty)

    def set_error_text(self, text: Optional[str]) -> None:
        """Implement ErrorDisplayable ABC."""
        self.setText(text or "")
        if self._hide_when_empty:
            self.setVisible(text is not None)

    def error_text(self) -> Optional[str]:
        return self.text() or None
