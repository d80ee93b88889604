"""
smart-form: form state management with dirty-gated auto-validation.

A form aggregates field controllers and fans out save/reset/validate to
all of them. Unlike a stock form, auto-validation of a field starts only
after the user changed that field at least once, never on first render.

Architecture:
- Forms: FormController and FieldController, the rendering-independent core
- Protocols: widget ABCs, Qt adapters and configuration
- Services: signal blocking for binding widgets to controllers
- Widgets: PyQt6 binding layer (SmartForm, text and dropdown fields)
"""

__version__ = "0.1.0"

from smart_form.exceptions import FormContractError
from smart_form.forms import FormController, FieldController
from smart_form.protocols import SmartFormConfig, set_form_config, get_form_config

__all__ = [
    "__version__",
    "FormContractError",
    "FormController",
    "FieldController",
    "SmartFormConfig",
    "set_form_config",
    "get_form_config",
]
