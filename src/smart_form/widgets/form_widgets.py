"""PyQt6 binding layer - VIEW widgets for the FormController/FieldController MODEL."""

import logging
from typing import Any, Callable, Optional

from PyQt6.QtWidgets import QWidget, QVBoxLayout
from PyQt6.QtGui import QCloseEvent

from smart_form.forms.form_controller import FormController
from smart_form.forms.field_controller import FieldController, FieldValidator, FieldSetter
from smart_form.protocols.form_config import get_form_config
from smart_form.protocols.widget_protocols import ValueGettable, ValueSettable, UserEditEmitter
from smart_form.protocols.widget_adapters import ErrorLabelAdapter
from smart_form.services.signal_service import SignalService

logger = logging.getLogger(__name__)


class SmartForm(QWidget):
    """
    Container widget grouping SmartFormField widgets.

    Owns a FormController. Field widgets added below it (at any depth) find
    it through ``SmartForm.of()`` by walking the QWidget parent chain.

    Examples:
        form = SmartForm(autovalidate=True)
        email = SmartTextFormField(validator=required)
        form.add_field(email)

        if form.controller.validate():
            form.controller.save()
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        autovalidate: Optional[bool] = None,
        on_changed: Optional[Callable[[], None]] = None,
        on_will_pop: Optional[Callable[[], bool]] = None,
    ):
        super().__init__(parent)
        self.controller = FormController(
            autovalidate=autovalidate,
            on_changed=on_changed,
            on_will_pop=on_will_pop,
            parent=self,
        )
        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)

    @staticmethod
    def of(widget: QWidget) -> Optional[FormController]:
        """Return the controller of the closest SmartForm enclosing ``widget``."""
        current = widget.parentWidget()
        while current is not None:
            if isinstance(current, SmartForm):
                return current.controller
            current = current.parentWidget()
        return None

    def add_field(self, field_widget: 'SmartFormField') -> None:
        """Place a field widget in this form and activate it."""
        if not isinstance(field_widget, SmartFormField):
            raise TypeError(f"{type(field_widget).__name__} is not a SmartFormField")
        self._layout.addWidget(field_widget)
        field_widget.activate()

    def remove_field(self, field_widget: 'SmartFormField') -> None:
        """Deactivate a field widget and take it out of this form."""
        field_widget.deactivate()
        self._layout.removeWidget(field_widget)
        field_widget.setParent(None)

    def closeEvent(self, event: QCloseEvent) -> None:
        if not self.controller.will_pop():
            logger.debug("Close vetoed by on_will_pop")
            event.ignore()
            return
        super().closeEvent(event)


class _FormMembership:
    """The form a field widget registered with, kept outside the widget.

    Teardown cannot use the parent-chain lookup, so the form joined at
    activation is remembered here.
    """

    def __init__(self, field: FieldController):
        self.field = field
        self.form: Optional[FormController] = None

    def release(self) -> None:
        if self.form is not None:
            self.form.unregister(self.field)
            self.form = None

    def on_destroyed(self) -> None:
        if self.form is not None:
            logger.debug(f"Field widget destroyed, unregistering {self.field!r}")
        self.release()


class SmartFormField(QWidget):
    """
    Binds an input adapter and an error indicator to a FieldController.

    The input widget must implement ValueGettable, ValueSettable and
    UserEditEmitter. User edits are forwarded to ``FieldController.did_change``
    exactly once each; controller state is pushed back into the input widget
    with signals blocked, so a programmatic update never counts as an edit.

    The widget re-renders when its own controller requests it and whenever
    the generation of the enclosing form changes.
    """

    def __init__(
        self,
        input_widget: QWidget,
        initial_value: Any = None,
        validator: Optional[FieldValidator] = None,
        on_saved: Optional[FieldSetter] = None,
        autovalidate: Optional[bool] = None,
        enabled: Optional[bool] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        for abc_type in (ValueGettable, ValueSettable, UserEditEmitter):
            if not isinstance(input_widget, abc_type):
                raise TypeError(f"{type(input_widget).__name__} does not implement {abc_type.__name__}")

        self.field: FieldController = FieldController(
            initial_value=initial_value,
            validator=validator,
            on_saved=on_saved,
            autovalidate=autovalidate,
            enabled=enabled,
            form_lookup=lambda: SmartForm.of(self),
        )
        self._membership = _FormMembership(self.field)

        self.input_widget = input_widget
        self.input_widget.setEnabled(self.field.enabled)
        self.error_label = ErrorLabelAdapter(hide_when_empty=get_form_config().hide_empty_error_label)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.input_widget)
        layout.addWidget(self.error_label)

        self.input_widget.connect_user_edit(self._on_user_edit)
        self.field.signals.render_requested.connect(self.refresh)
        # The slot must not touch self: the widget is gone when it runs
        membership = self._membership
        self.destroyed.connect(lambda *args: membership.on_destroyed())
        self.refresh()

    @property
    def error_text(self) -> Optional[str]:
        """Error text currently displayed."""
        return self.error_label.error_text()

    def refresh(self) -> None:
        """Render pass: run the field's render check, then display its state."""
        self.field.render()
        if self.input_widget.get_value() != self.field.value:
            SignalService.update_widget_value(self.input_widget, self.field.value)
        self.error_label.set_error_text(self.field.error_text)

    def activate(self) -> None:
        """Register with the enclosing form and follow its generation.

        A field moved to another form leaves the previous one first.
        """
        form = SmartForm.of(self)
        if form is not self._membership.form:
            self._leave_form()
            if form is not None:
                form.generation_changed.connect(self._on_generation_changed)
            self._membership.form = form
        self.field.activate()
        self.refresh()

    def deactivate(self) -> None:
        """Unregister from the enclosing form."""
        self.field.deactivate()
        self._leave_form()

    def _leave_form(self) -> None:
        form = self._membership.form
        if form is not None:
            form.generation_changed.disconnect(self._on_generation_changed)
        self._membership.release()

    def _on_generation_changed(self, generation: int) -> None:
        self.refresh()

    def _on_user_edit(self, value: Any) -> None:
        self.field.did_change(value)
