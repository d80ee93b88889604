"""Dropdown selection form field."""

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from PyQt6.QtWidgets import QWidget

from smart_form.exceptions import FormContractError
from smart_form.forms.field_controller import FieldValidator, FieldSetter
from smart_form.protocols.widget_adapters import ComboBoxAdapter
from .form_widgets import SmartFormField

logger = logging.getLogger(__name__)


class SmartDropdownFormField(SmartFormField):
    """
    A SmartFormField wrapping a combo box.

    Items are ``(label, value)`` pairs. A user selection is reported to the
    field controller first and then to ``on_changed``. Without ``on_changed``
    the dropdown is disabled.

    Raises:
        FormContractError: if ``value`` is given and does not match exactly
            one of the items.
    """

    def __init__(
        self,
        items: Sequence[Tuple[str, Any]],
        value: Any = None,
        on_changed: Optional[Callable[[Any], None]] = None,
        validator: Optional[FieldValidator] = None,
        on_saved: Optional[FieldSetter] = None,
        autovalidate: Optional[bool] = None,
        parent: Optional[QWidget] = None,
    ):
        if items and value is not None:
            matches = sum(1 for _, item_value in items if item_value == value)
            if matches != 1:
                logger.debug(f"Rejected dropdown value {value!r}: {matches} matching item(s)")
                raise FormContractError(
                    f"There should be exactly one item with the dropdown's value: {value!r}. "
                    f"Either zero or 2 or more items were detected with the same value"
                )

        combo = ComboBoxAdapter()
        for label, item_value in items:
            combo.addItem(label, item_value)

        super().__init__(
            combo,
            initial_value=value,
            validator=validator,
            on_saved=on_saved,
            autovalidate=autovalidate,
            parent=parent,
        )
        self._on_changed = on_changed
        if on_changed is None:
            combo.setEnabled(False)

    @property
    def combo_box(self) -> ComboBoxAdapter:
        return self.input_widget

    def _on_user_edit(self, value: Any) -> None:
        super()._on_user_edit(value)
        if self._on_changed is not None:
            self._on_changed(value)
