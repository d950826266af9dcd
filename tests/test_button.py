from __future__ import annotations

from swapui import styles
from swapui.html import Attrs
from swapui.inputs import Button, InputKind
from swapui.target import Target

_DISABLED = "cursor-text pointer-events-none bg-gray-50 opacity-25"


def test_plain_button_is_an_accessible_div() -> None:
    rendered = Button(target=Target(id="b1")).render("X")
    assert rendered == (
        '<div id="b1" aria-label="X" aria-disabled="false" role="button" tabindex="0" '
        'class="cursor-pointer font-bold text-center select-none p-3">X</div>'
    )
    assert _DISABLED not in rendered


def test_disabled_button() -> None:
    rendered = Button().disabled(True).render("X")
    assert _DISABLED in rendered
    assert 'aria-disabled="true"' in rendered


def test_submit_and_reset_render_button_elements() -> None:
    submit = Button().submit().disabled().render("Save")
    assert submit.startswith('<button type="submit"')
    assert 'disabled="disabled"' in submit
    assert 'role="button"' not in submit
    assert Button().reset().render("Clear").startswith('<button type="reset"')


def test_href_renders_link() -> None:
    rendered = Button().href("/next").render("Next")
    assert rendered.startswith('<a href="/next"')
    assert rendered.endswith(">Next</a>")
    assert "tabindex" not in rendered


def test_extra_attributes_come_first() -> None:
    rendered = Button(Attrs(title="tip"), target=Target(id="b2")).click("go()").render("Go")
    assert rendered.startswith('<div title="tip" id="b2" onclick="go()"')


def test_color_size_and_visibility() -> None:
    builder = Button().color(styles.RED).size(styles.SM).css("w-full")
    rendered = builder.render("Delete")
    assert builder.kind is InputKind.BUTTON
    assert styles.RED.strip() in rendered
    assert " p-2 " in rendered
    assert builder.visible(False).render("Delete") == ""


def test_button_has_no_data_setters() -> None:
    assert not hasattr(Button(), "required")
    assert not hasattr(Button(), "change")
