"""
PyQt6 binding layer.

SmartForm hosts field widgets; SmartFormField binds any adapter that
implements the widget ABCs to a FieldController.
"""

from .form_widgets import SmartForm, SmartFormField
from .text_form_field import SmartTextFormField
from .dropdown_form_field import SmartDropdownFormField

__all__ = [
    "SmartForm",
    "SmartFormField",
    "SmartTextFormField",
    "SmartDropdownFormField",
]
