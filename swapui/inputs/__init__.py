"""Fluent form-control builders bound to data by dot-separated paths."""

from .base import Builder, Control, Field, InputKind, InputState
from .button import Button
from .choice import Checkbox, Option, Radio, RadioButtons, SelectInput
from .dates import DateInput, DateTimeInput, TimeInput
from .numeric import NumberInput
from .text import PasswordInput, TextArea, TextInput

__all__ = [
    "Builder",
    "Button",
    "Checkbox",
    "Control",
    "DateInput",
    "DateTimeInput",
    "Field",
    "InputKind",
    "InputState",
    "NumberInput",
    "Option",
    "PasswordInput",
    "Radio",
    "RadioButtons",
    "SelectInput",
    "TextArea",
    "TextInput",
    "TimeInput",
]
