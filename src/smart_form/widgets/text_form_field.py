"""Text input form field."""

from typing import Optional

from PyQt6.QtWidgets import QWidget

from smart_form.forms.field_controller import FieldValidator, FieldSetter
from smart_form.protocols.widget_adapters import LineEditAdapter
from .form_widgets import SmartFormField


class SmartTextFormField(SmartFormField):
    """
    A SmartFormField wrapping a line edit.

    Every ``textEdited`` emission is one user edit. Text set by the binding
    layer after a reset does not dirty the field.
    """

    def __init__(
        self,
        initial_value: str = "",
        validator: Optional[FieldValidator] = None,
        on_saved: Optional[FieldSetter] = None,
        autovalidate: Optional[bool] = None,
        enabled: Optional[bool] = None,
        placeholder: Optional[str] = None,
        parent: Optional[QWidget] = None,
    ):
        line_edit = LineEditAdapter()
        if placeholder:
            line_edit.setPlaceholderText(placeholder)
        super().__init__(
            line_edit,
            initial_value=initial_value,
            validator=validator,
            on_saved=on_saved,
            autovalidate=autovalidate,
            enabled=enabled,
            parent=parent,
        )

    @property
    def line_edit(self) -> LineEditAdapter:
        return self.input_widget
