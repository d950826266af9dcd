"""Server-side HTML components addressed for partial updates."""

from .errors import ConfigError, IdGenerationError, InputKindError, SwapUIError
from .form import Form
from .ids import IdSource, generate_id, make_id
from .inputs import (
    Button,
    Checkbox,
    DateInput,
    DateTimeInput,
    InputKind,
    NumberInput,
    Option,
    PasswordInput,
    Radio,
    RadioButtons,
    SelectInput,
    TextArea,
    TextInput,
    TimeInput,
)
from .table import SimpleTable, parse_colspan
from .target import SkeletonKind, Swap, SwapIntent, Target

__version__ = "0.1.0"

__all__ = [
    "Button",
    "Checkbox",
    "ConfigError",
    "DateInput",
    "DateTimeInput",
    "Form",
    "IdGenerationError",
    "IdSource",
    "InputKind",
    "InputKindError",
    "NumberInput",
    "Option",
    "PasswordInput",
    "Radio",
    "RadioButtons",
    "SelectInput",
    "SimpleTable",
    "SkeletonKind",
    "Swap",
    "SwapIntent",
    "SwapUIError",
    "Target",
    "TextArea",
    "TextInput",
    "TimeInput",
    "__version__",
    "generate_id",
    "make_id",
    "parse_colspan",
]
