from pathlib import Path
import textwrap

import pytest

from extscaffold.config import ConfigError, load_config


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "extscaffold.toml"
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_defaults_root_to_config_directory(tmp_path: Path) -> None:
    config = load_config(_write_config(tmp_path, 'name = "Demo"'))

    assert config.name == "Demo"
    assert config.root == tmp_path.resolve()
    assert config.mount_ext == ".tsx"
    assert config.substitution == "sequential"
    assert config.strict_html is False


def test_relative_paths_resolve_against_config(tmp_path: Path) -> None:
    config = load_config(
        _write_config(
            tmp_path,
            """
            root = "app"
            template_root = "my-templates"
            """,
        )
    )

    assert config.root == (tmp_path / "app").resolve()
    assert config.template_root == (tmp_path / "my-templates").resolve()


def test_nested_scaffold_table_is_accepted(tmp_path: Path) -> None:
    config = load_config(
        _write_config(
            tmp_path,
            """
            [scaffold]
            name = "Nested"
            ui_extensions = ["vue", ".Svelte", ".vue"]
            """,
        )
    )

    assert config.name == "Nested"
    assert config.ui_extensions == [".vue", ".svelte"]


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.toml")


def test_invalid_toml_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(_write_config(tmp_path, "name = "))


@pytest.mark.parametrize(
    "body",
    [
        'mount_ext = "tsx"',
        'substitution = "regex"',
        'unknown_key = 1',
    ],
)
def test_invalid_values_raise(tmp_path: Path, body: str) -> None:
    with pytest.raises(ConfigError):
        load_config(_write_config(tmp_path, body))
