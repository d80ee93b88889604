"""
Form state core.

Rendering-independent state holders: FormController aggregates fields,
FieldController tracks one field's value, dirty flag and error.
"""

from .form_controller import FormController
from .field_controller import (
    FieldController,
    FieldSignals,
    FieldValidator,
    FieldSetter,
    FormLookup,
)

__all__ = [
    "FormController",
    "FieldController",
    "FieldSignals",
    "FieldValidator",
    "FieldSetter",
    "FormLookup",
]
