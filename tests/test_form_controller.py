"""Tests for FormController."""

import pytest

from smart_form.forms import FieldController, FormController
from smart_form.protocols import SmartFormConfig, set_form_config


def make_field(form, **kwargs):
    field = FieldController(form_lookup=lambda: form, **kwargs)
    field.activate()
    return field


def required(value):
    return None if value else "required"


def test_register_is_idempotent(qapp):
    form = FormController()
    field = FieldController(form_lookup=lambda: form)

    form.register(field)
    form.register(field)

    assert form.fields == (field,)


def test_register_is_by_identity(qapp):
    form = FormController()
    first = make_field(form, initial_value="same")
    second = make_field(form, initial_value="same")

    assert form.fields == (first, second)


def test_unregister(qapp):
    form = FormController()
    field = make_field(form)
    other = FieldController()

    form.unregister(other)
    assert form.fields == (field,)

    field.deactivate()
    assert form.fields == ()
    form.unregister(field)


def test_register_does_not_validate(qapp):
    form = FormController(autovalidate=True)
    field = make_field(form, validator=required)

    assert field.error_text is None
    assert form.generation == 0


def test_save_fan_out(qapp):
    """Every field's on_saved runs exactly once with its own value."""
    saved = []
    form = FormController()
    a = make_field(form, initial_value="a", on_saved=lambda v: saved.append(("a", v)))
    make_field(form, initial_value="b")
    make_field(form, initial_value="c", on_saved=lambda v: saved.append(("c", v)))
    a.did_change("a2")

    form.save()

    assert sorted(saved) == [("a", "a2"), ("c", "c")]


def test_reset_notifies_once(qapp):
    changes = []
    generations = []
    form = FormController(on_changed=lambda: changes.append(1))
    form.generation_changed.connect(generations.append)
    a = make_field(form, initial_value="a", validator=required)
    b = make_field(form, initial_value="b", validator=required)
    a.did_change("")
    b.did_change("")
    form.validate()
    changes.clear()
    generations.clear()

    form.reset()

    assert changes == [1]
    assert generations == [form.generation]
    for field, initial in ((a, "a"), (b, "b")):
        assert field.value == initial
        assert not field.dirty
        assert field.error_text is None


def test_reset_then_render_stays_clean(qapp):
    form = FormController(autovalidate=True)
    field = make_field(form, initial_value="", validator=lambda v: f"{v}/error", autovalidate=True)
    field.did_change("x")
    form.render()
    assert field.error_text == "x/error"

    form.reset()
    form.render()

    assert field.error_text is None


def test_validate_is_total(qapp):
    """validate() checks every field regardless of dirty or auto-validate settings."""
    form = FormController()
    a = make_field(form, initial_value="", validator=required)
    b = make_field(form, initial_value="", validator=required, autovalidate=True)
    c = make_field(form, initial_value="ok", validator=required, enabled=False)

    assert form.validate() is False
    assert a.error_text == "required"
    assert b.error_text == "required"
    assert c.error_text is None

    a.set_value("x")
    b.set_value("y")
    assert form.validate() is True


def test_validate_bumps_generation(qapp):
    generations = []
    form = FormController()
    form.generation_changed.connect(generations.append)

    assert form.validate() is True
    assert form.validate() is True
    assert generations == [1, 2]


def test_field_change_notifies_form(qapp):
    changes = []
    form = FormController(on_changed=lambda: changes.append(form.generation))
    field = make_field(form)

    field.did_change(1)
    field.did_change(2)

    assert changes == [0, 1]
    assert form.generation == 2


def test_dirty_gating_across_fields(qapp):
    """Editing one field does not surface errors of untouched fields."""
    form = FormController(autovalidate=True)
    a = make_field(form, initial_value="")
    b = make_field(form, initial_value="", validator=lambda v: f"{a.value}/error")

    a.did_change("Test")
    form.render()
    assert b.error_text is None

    b.did_change("Test")
    form.render()
    assert b.error_text == "Test/error"

    a.did_change("")
    form.render()
    assert b.error_text == "/error"


def test_cross_field_with_forced_validate(qapp):
    form = FormController()
    a = make_field(form, initial_value="")
    b = make_field(form, initial_value="", validator=lambda v: None if a.value else "a is empty")

    assert form.validate() is False
    assert b.error_text == "a is empty"

    a.did_change("filled")
    assert form.validate() is True
    assert b.error_text is None


def test_will_pop(qapp):
    assert FormController().will_pop() is True
    assert FormController(on_will_pop=lambda: False).will_pop() is False


def test_config_default_autovalidate(qapp):
    set_form_config(SmartFormConfig(default_autovalidate=True))

    assert FormController().autovalidate is True
    assert FormController(autovalidate=False).autovalidate is False


def test_save_propagates_callback_error(qapp):
    form = FormController()

    def broken(value):
        raise ValueError("cannot save")

    make_field(form, on_saved=broken)

    with pytest.raises(ValueError, match="cannot save"):
        form.save()
