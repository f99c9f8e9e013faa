from pathlib import Path

import pytest

pytest.importorskip("yaml")

from utf8text import config as config_module
from utf8text.config import AppConfig, dump_default_config, load_config
from utf8text.width import CJK_TABLE, DEFAULT_TABLE


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "runtime_config_dir", lambda: tmp_path / "user")
    return tmp_path


def test_defaults_when_no_file(isolated: Path) -> None:
    config = load_config()
    assert config == AppConfig()
    assert config.scanner_config().width_table == DEFAULT_TABLE
    assert config.logging.normalized_level() == "INFO"


def test_explicit_file(isolated: Path) -> None:
    path = isolated / "custom.yaml"
    path.write_text("width:\n  table: wcwidth.cjk\nlogging:\n  level: debug\n", encoding="utf-8")
    config = load_config(path)
    assert config.scanner_config().width_table == CJK_TABLE
    assert config.logging.normalized_level() == "DEBUG"


def test_local_file_is_discovered(isolated: Path) -> None:
    local = isolated / ".utf8text" / "config.yaml"
    local.parent.mkdir()
    local.write_text("width:\n  table: wcwidth.cjk\n", encoding="utf-8")
    assert load_config().width.table == CJK_TABLE


@pytest.mark.parametrize(
    "content",
    [
        "logging:\n  level: loud\n",
        "width:\n  table: '  '\n",
        "- not\n- a mapping\n",
    ],
)
def test_invalid_file(isolated: Path, content: str) -> None:
    path = isolated / "bad.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_dump_default_round_trip(isolated: Path) -> None:
    target = isolated / "out" / "config.yaml"
    dump_default_config(target)
    assert load_config(target) == AppConfig()


def test_default_copy_is_independent(isolated: Path) -> None:
    config = load_config()
    config.width.table = CJK_TABLE
    assert load_config().width.table == DEFAULT_TABLE


def test_find_config_file_prefers_local_over_user(isolated: Path) -> None:
    assert config_module.find_config_file() is None
    user = isolated / "user" / "config.yaml"
    user.parent.mkdir()
    user.write_text("{}\n", encoding="utf-8")
    assert config_module.find_config_file() == user
    local = isolated / ".utf8text" / "config.yaml"
    local.parent.mkdir()
    local.write_text("{}\n", encoding="utf-8")
    assert config_module.find_config_file().resolve() == local.resolve()
