"""
Form controller - aggregates field controllers and fans out form operations.

A FormController is a pure aggregator. Its only state besides configuration is
the generation counter, a change-detection token that the rendering layer
watches through ``generation_changed`` to know when every field must re-render.
"""

import logging
from typing import Callable, Dict, Optional, Tuple, TYPE_CHECKING

from PyQt6.QtCore import QObject, pyqtSignal

from smart_form.protocols.form_config import get_form_config

if TYPE_CHECKING:
    from smart_form.forms.field_controller import FieldController

logger = logging.getLogger(__name__)


class FormController(QObject):
    """
    State holder for a form: field membership, generation counter and
    save/reset/validate orchestration.

    Fields register themselves on activation and unregister on teardown. The
    form never owns field lifetime, it only tracks membership for broadcast.

    Examples:
        form = FormController(autovalidate=True)
        name = FieldController(initial_value="", validator=required,
                               form_lookup=lambda: form)
        name.activate()

        name.did_change("Ada")   # user edit: dirty, form notified
        form.render()            # render pass: dirty fields auto-validate
        if form.validate():      # forced validation of every field
            form.save()
    """

    # Emitted with the new generation whenever every field must re-render
    generation_changed = pyqtSignal(int)

    def __init__(
        self,
        autovalidate: Optional[bool] = None,
        on_changed: Optional[Callable[[], None]] = None,
        on_will_pop: Optional[Callable[[], bool]] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        config = get_form_config()
        self._autovalidate = config.default_autovalidate if autovalidate is None else autovalidate
        self.on_changed = on_changed
        self.on_will_pop = on_will_pop
        self._generation = 0
        # Keyed by id() so membership is by identity, in registration order
        self._fields: Dict[int, 'FieldController'] = {}

    @property
    def autovalidate(self) -> bool:
        """True if fields of this form auto-validate once they are dirty."""
        return self._autovalidate

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def fields(self) -> Tuple['FieldController', ...]:
        """Snapshot of the registered fields."""
        return tuple(self._fields.values())

    # ========== REGISTRATION ==========

    def register(self, field: 'FieldController') -> None:
        """Add a field to the form. Re-registering the same field is a no-op."""
        key = id(field)
        if key not in self._fields:
            self._fields[key] = field
            logger.debug(f"Registered field {field!r} (total: {len(self._fields)})")

    def unregister(self, field: 'FieldController') -> None:
        """Remove a field from the form. No-op if it is not registered."""
        if self._fields.pop(id(field), None) is not None:
            logger.debug(f"Unregistered field {field!r} (total: {len(self._fields)})")

    # ========== ORCHESTRATION ==========

    def save(self) -> None:
        """Call ``save()`` on every registered field."""
        for field in self.fields:
            field.save()

    def reset(self) -> None:
        """Reset every registered field to its initial value.

        Fields are reset individually, then a single form-level change
        notification is raised: ``on_changed`` runs once and the generation
        advances once.
        """
        fields = self.fields
        for field in fields:
            field.reset()
        logger.debug(f"Reset {len(fields)} field(s)")
        self._field_did_change()

    def validate(self) -> bool:
        """Validate every registered field and return True if none has an error.

        Dirty gating does not apply here. The form is re-rendered first so that
        error text becomes visible immediately.
        """
        self._force_rebuild()
        return self._validate()

    def will_pop(self) -> bool:
        """Ask ``on_will_pop`` whether the host of this form may be dismissed."""
        if self.on_will_pop is None:
            return True
        return bool(self.on_will_pop())

    # ========== RENDERING ==========

    def render(self) -> None:
        """Run a render pass: every field re-evaluates its auto-validate check.

        Form-level auto-validation reaches each field through the field's
        effective auto-validate flag, so only dirty fields surface errors.
        """
        for field in self.fields:
            field.render()

    # ========== INTERNAL ==========

    def _validate(self) -> bool:
        has_error = False
        for field in self.fields:
            # Every field must run, no short-circuit
            has_error = not field.validate() or has_error
        logger.debug(f"Validated {len(self._fields)} field(s): valid={not has_error}")
        return not has_error

    def _field_did_change(self) -> None:
        """Called by a field after a user change; re-renders every field.

        Re-rendering all fields lets validators that read other fields'
        values see the latest state.
        """
        if self.on_changed is not None:
            self.on_changed()
        self._force_rebuild()

    def _force_rebuild(self) -> None:
        self._generation += 1
        self.generation_changed.emit(self._generation)
