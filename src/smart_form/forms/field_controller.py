"""
Field controller - state of a single form field.

Holds the current value, the initial value, the dirty flag and the last
validation error. The dirty flag gates auto-validation: a field never
auto-validates before the user has changed it at least once, even when
auto-validation is enabled from the first render.
"""

import logging
from typing import Callable, Generic, Optional, TypeVar, TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from smart_form.protocols.form_config import get_form_config

if TYPE_CHECKING:
    from smart_form.forms.form_controller import FormController

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Returns an error message for an invalid value, None otherwise
FieldValidator = Callable[[T], Optional[str]]
# Receives the field value when the form is saved
FieldSetter = Callable[[T], None]
# Resolves the nearest enclosing form, None when the field is standalone
FormLookup = Callable[[], Optional['FormController']]


class FieldSignals(QObject):
    """Qt signals of a FieldController."""

    # Emitted when the field's own state changed and its view must re-render
    render_requested = pyqtSignal()


class FieldController(Generic[T]):
    """
    State holder for one form field.

    The rendering layer binds to ``signals.render_requested`` and calls
    ``render()`` on each re-render; it reads ``error_text`` afterwards to decide
    whether to show an error indicator. Adapters report user edits through
    ``did_change()``, never through ``set_value()``.

    The enclosing form is never stored. It is resolved through ``form_lookup``
    whenever it is needed, so a field may be re-parented or live without any
    form at all.
    """

    def __init__(
        self,
        initial_value: Optional[T] = None,
        validator: Optional[FieldValidator] = None,
        on_saved: Optional[FieldSetter] = None,
        autovalidate: Optional[bool] = None,
        enabled: Optional[bool] = None,
        form_lookup: Optional[FormLookup] = None,
    ):
        config = get_form_config()
        self._initial_value = initial_value
        self._value = initial_value
        self._error_text: Optional[str] = None
        self._dirty = False
        self._autovalidate = config.default_autovalidate if autovalidate is None else autovalidate
        self._enabled = config.default_enabled if enabled is None else enabled
        self.validator = validator
        self.on_saved = on_saved
        self.form_lookup = form_lookup
        self.signals = FieldSignals()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, dirty={self._dirty})"

    # ========== ACCESSORS ==========

    @property
    def value(self) -> Optional[T]:
        return self._value

    @property
    def initial_value(self) -> Optional[T]:
        return self._initial_value

    @property
    def error_text(self) -> Optional[str]:
        """Error returned by the last validator run, None if none was triggered.

        Only refreshed by ``validate()`` and the auto-validate render check, so
        it may describe an older value.
        """
        return self._error_text

    @property
    def has_error(self) -> bool:
        return self._error_text is not None

    @property
    def is_valid(self) -> bool:
        """True if the current value passes the validator.

        Does not touch ``error_text``. See ``validate()`` for the updating
        variant.
        """
        if self.validator is None:
            return True
        return self.validator(self._value) is None

    @property
    def dirty(self) -> bool:
        """True once ``did_change()`` was called since construction or reset."""
        return self._dirty

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def autovalidate(self) -> bool:
        return self._autovalidate

    # ========== OPERATIONS ==========

    def save(self) -> None:
        """Pass the current value to ``on_saved``."""
        if self.on_saved is not None:
            self.on_saved(self._value)

    def reset(self) -> None:
        """Return the field to its construction-time state.

        The enclosing form is not notified; ``FormController.reset()`` does
        that once for all fields.
        """
        self._dirty = False
        self._value = self._initial_value
        self._error_text = None
        logger.debug(f"Reset field to {self._initial_value!r}")
        self._request_render()

    def validate(self) -> bool:
        """Run the validator to set ``error_text``. Returns True if there is no error.

        Without a validator, ``error_text`` is left as it was.
        """
        self._validate()
        logger.debug(f"Validated {self!r}: error={self._error_text!r}")
        self._request_render()
        return not self.has_error

    def did_change(self, value: T) -> None:
        """Record a user edit.

        This is the only path that marks the field dirty. The value is stored,
        a local re-render is requested and then the enclosing form is notified,
        in that order, before returning.
        """
        self._dirty = True
        self._value = value
        self._request_render()
        form = self.enclosing_form()
        if form is not None:
            form._field_did_change()

    def set_value(self, value: T) -> None:
        """Assign the value without notifying anyone or marking the field dirty.

        Reserved for adapters correcting the value during a render pass. User
        edits go through ``did_change()``.
        """
        self._value = value

    def render(self) -> None:
        """Render-time check: auto-validate when enabled and dirty."""
        if self.should_autovalidate():
            self._validate()

    def should_autovalidate(self) -> bool:
        """True if the current render pass must recompute ``error_text``."""
        if not (self._enabled and self._dirty):
            return False
        if self._autovalidate:
            return True
        form = self.enclosing_form()
        return form is not None and form.autovalidate

    # ========== LIFECYCLE ==========

    def enclosing_form(self) -> Optional['FormController']:
        if self.form_lookup is None:
            return None
        return self.form_lookup()

    def activate(self) -> None:
        """Register with the enclosing form, if any."""
        form = self.enclosing_form()
        if form is not None:
            form.register(self)

    def deactivate(self) -> None:
        """Unregister from the enclosing form, if any."""
        form = self.enclosing_form()
        if form is not None:
            form.unregister(self)

    # ========== INTERNAL ==========

    def _validate(self) -> None:
        if self.validator is not None:
            self._error_text = self.validator(self._value)

    def _request_render(self) -> None:
        self.signals.render_requested.emit()
