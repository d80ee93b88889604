"""Base configuration class for smart forms.

Provides hooks for applications to customize form defaults.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class SmartFormConfig:
    """Base configuration for form behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        default_autovalidate: Auto-validation mode used when a form or field
            is created with ``autovalidate=None``
        default_enabled: Enabled state used when a field is created with
            ``enabled=None``
        hide_empty_error_label: Whether field widgets hide their error label
            while the field has no error
    """

    default_autovalidate: bool = False
    default_enabled: bool = True
    hide_empty_error_label: bool = True


# Global config instance (set by application)
_form_config: Optional[SmartFormConfig] = None


def set_form_config(config: Optional[SmartFormConfig]) -> None:
    """Set the global form configuration.

    Args:
        config: SmartFormConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> SmartFormConfig:
    """Get the current form configuration.

    Returns:
        Current SmartFormConfig or default if not set
    """
    if _form_config is None:
        return SmartFormConfig()
    return _form_config
