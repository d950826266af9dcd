from __future__ import annotations

from pathlib import Path

import pytest

from swapui.config import Config, load_config
from swapui.errors import ConfigError


def _write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "swapui.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_defaults_without_file(tmp_path: Path) -> None:
    assert load_config(None) == Config()
    config = load_config(tmp_path / "missing.toml")
    assert config.ids.prefix == "i"
    assert config.ids.length == 15
    assert config.skeleton.list_count == 5


def test_overrides_are_applied(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        """
[ids]
prefix = "w-"
length = 20

[skeleton]
list_count = 3
""",
    )
    config = load_config(path)
    assert config.ids.prefix == "w-"
    assert config.ids.length == 20
    assert config.skeleton.list_count == 3


def test_partial_sections_keep_defaults(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, "[ids]\nlength = 12\n"))
    assert config.ids.prefix == "i"
    assert config.ids.length == 12


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("[ids]\nlength = 8\n", "ids.length must be at least 12"),
        ("[ids]\nlength = true\n", "ids.length must be an integer"),
        ("[ids]\nlength = \"long\"\n", "ids.length must be an integer"),
        ("[ids]\nprefix = \"1x\"\n", "ids.prefix must start with a letter"),
        ("[ids]\nprefix = \"a b\"\n", "ids.prefix"),
        ("[skeleton]\nlist_count = 0\n", "skeleton.list_count must be positive"),
        ("ids = 3\n", "ids must be a table"),
    ],
)
def test_invalid_values_raise(tmp_path: Path, content: str, message: str) -> None:
    with pytest.raises(ConfigError, match=message):
        load_config(_write_config(tmp_path, content))


def test_config_error_is_a_value_error() -> None:
    assert issubclass(ConfigError, ValueError)
