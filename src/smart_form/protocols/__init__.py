"""
Widget protocol definitions, adapters and configuration.

ABC-based widget contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    UserEditEmitter,
    ErrorDisplayable,
)
from .widget_adapters import (
    LineEditAdapter,
    ComboBoxAdapter,
    ErrorLabelAdapter,
    PyQtWidgetMeta,
)
from .form_config import SmartFormConfig, set_form_config, get_form_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "UserEditEmitter",
    "ErrorDisplayable",
    "LineEditAdapter",
    "ComboBoxAdapter",
    "ErrorLabelAdapter",
    "PyQtWidgetMeta",
    "SmartFormConfig",
    "set_form_config",
    "get_form_config",
]
