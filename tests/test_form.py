from __future__ import annotations

import pytest

from swapui.errors import InputKindError
from swapui.form import Form
from swapui.html import Attrs
from swapui.inputs import Button, InputKind, NumberInput, RadioButtons, TextInput


def test_render_emits_hidden_childless_form(counter_ids) -> None:
    form = Form(Attrs(onsubmit="send()"), id_source=counter_ids)
    assert form.form_id == "t1"
    assert form.render() == (
        '<form id="t1" onsubmit="send()" aria-label="Form t1" role="form" class="hidden"></form>'
    )


def test_default_form_id_is_generated() -> None:
    form = Form()
    assert form.form_id.startswith("i")
    assert len(form.form_id) == 16
    assert form.render().startswith(f'<form id="{form.form_id}"')


@pytest.mark.parametrize(
    "method",
    [
        "text",
        "password",
        "area",
        "number",
        "date",
        "time",
        "datetime",
        "select",
        "checkbox",
        "radio",
    ],
)
def test_every_builder_carries_the_form_id(counter_ids, method: str) -> None:
    form = Form(id_source=counter_ids)
    builder = getattr(form, method)("Field", {"Field": "v"})
    assert builder.form_id == "t1"
    assert 'form="t1"' in builder.render("Field")


def test_radio_buttons_stamp_every_option(counter_ids) -> None:
    form = Form(id_source=counter_ids)
    builder = form.radio_buttons("Pick").options([("a", "A"), ("b", "B")])
    assert isinstance(builder, RadioButtons)
    assert builder.render("Pick").count('form="t1"') == 2


def test_button_carries_the_form_id(counter_ids) -> None:
    form = Form(id_source=counter_ids)
    button = form.button()
    assert isinstance(button, Button)
    assert 'form="t1"' in button.submit().render("Save")


def test_builders_returned_are_the_standalone_kinds(counter_ids) -> None:
    form = Form(id_source=counter_ids)
    assert isinstance(form.text("Name"), TextInput)
    assert form.number("Qty").kind is InputKind.NUMBER


def test_field_dispatches_by_kind(counter_ids) -> None:
    form = Form(id_source=counter_ids)
    builder = form.field("number", "Qty", {"Qty": 2})
    assert isinstance(builder, NumberInput)
    assert builder.form_id == "t1"
    assert isinstance(form.field(InputKind.TEXT, "Name"), TextInput)


def test_field_rejects_unknown_and_unbound_kinds(counter_ids) -> None:
    form = Form(id_source=counter_ids)
    with pytest.raises(InputKindError, match="unknown input kind"):
        form.field("slider", "x")
    with pytest.raises(InputKindError, match="not bound to data"):
        form.field(InputKind.BUTTON, "x")
