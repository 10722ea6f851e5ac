"""Tests for configuration loading."""

import tomllib
from pathlib import Path

import pytest

from track_bench.core import config as config_module
from track_bench.core.config import (
    Config,
    DisplayConfig,
    create_default_config,
    get_log_file_path,
    load_config,
    parse_config,
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point XDG directories at tmp_path and clear overrides."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("TRACK_BENCH_BACKEND", raising=False)
    monkeypatch.delenv("TRACK_BENCH_DATA_DIR", raising=False)
    monkeypatch.chdir(tmp_path)


def write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "custom.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults():
    cfg = Config()
    assert cfg.store.backend == "array"
    assert cfg.display.full_limit == 100
    assert cfg.display.medium_rows == 50
    assert len(cfg.data.preset_files) == 5
    assert cfg.performance.max_selection_sort_size == 20000


def test_default_config_text_parses_to_defaults():
    parsed = parse_config(tomllib.loads(create_default_config()))
    defaults = Config()

    assert parsed.store == defaults.store
    assert parsed.display == defaults.display
    assert parsed.data.preset_files == defaults.data.preset_files
    assert parsed.logging.level == "INFO"


def test_load_creates_default_file_when_missing(tmp_path):
    cfg = load_config()

    created = tmp_path / "config" / "track-bench" / "config.toml"
    assert created.exists()
    assert cfg == Config()


def test_load_prefers_local_config(tmp_path):
    (tmp_path / "config.toml").write_text('[store]\nbackend = "linked"\n', encoding="utf-8")

    cfg = load_config()

    assert cfg.store.backend == "linked"


def test_load_explicit_file(tmp_path):
    path = write_config(
        tmp_path,
        """
[data]
data_dir = "/datasets"
preset_files = ["a.csv", "b.csv"]

[display]
medium_rows = 20

[logging]
level = "debug"
log_file = "/tmp/track-bench-test.log"
""",
    )

    cfg = load_config(path)

    assert cfg.data.data_dir == "/datasets"
    assert [p.name for p in cfg.data.preset_paths()] == ["a.csv", "b.csv"]
    assert cfg.display.medium_rows == 20
    assert cfg.display.full_limit == 100
    assert cfg.logging.level == "DEBUG"
    assert get_log_file_path(cfg) == Path("/tmp/track-bench-test.log")


def test_missing_explicit_file_uses_defaults(tmp_path, capsys):
    cfg = load_config(tmp_path / "nope.toml")

    assert cfg == Config()
    assert "not found" in capsys.readouterr().out
    assert not (tmp_path / "nope.toml").exists()


def test_invalid_toml_uses_defaults(tmp_path, capsys):
    path = write_config(tmp_path, "[store\nbackend = ")

    cfg = load_config(path)

    assert cfg.store.backend == "array"
    assert "Error loading configuration" in capsys.readouterr().out


def test_invalid_backend_falls_back(tmp_path, capsys):
    path = write_config(tmp_path, '[store]\nbackend = "tree"\n')

    cfg = load_config(path)

    assert cfg.store.backend == "array"
    assert "Invalid store configuration" in capsys.readouterr().out


def test_environment_overrides(tmp_path, monkeypatch):
    path = write_config(tmp_path, '[store]\nbackend = "array"\n')
    monkeypatch.setenv("TRACK_BENCH_BACKEND", "Linked")
    monkeypatch.setenv("TRACK_BENCH_DATA_DIR", str(tmp_path / "sets"))

    cfg = load_config(path)

    assert cfg.store.backend == "linked"
    assert cfg.data.data_dir == str(tmp_path / "sets")


def test_dotenv_in_config_dir(tmp_path, monkeypatch):
    env_dir = tmp_path / "config" / "track-bench"
    env_dir.mkdir(parents=True)
    (env_dir / ".env").write_text("TRACK_BENCH_BACKEND=linked\n", encoding="utf-8")
    path = write_config(tmp_path, "")

    cfg = load_config(path)

    assert cfg.store.backend == "linked"


def test_default_log_file_under_data_dir(tmp_path):
    assert get_log_file_path(Config()) == tmp_path / "data" / "track-bench" / "track-bench.log"
    assert config_module.get_data_dir() == tmp_path / "data" / "track-bench"


def test_decode_errors_setting(tmp_path):
    path = write_config(tmp_path, '[data]\ndecode_errors = "strict"\n')

    assert load_config(path).data.decode_errors == "strict"
    assert Config().data.decode_errors == "replace"


@pytest.mark.parametrize(
    "display",
    ["sample_divisor = 0", "sample_divisor = -5", "medium_rows = -1", 'full_limit = "all"'],
)
def test_invalid_display_falls_back(tmp_path, capsys, display):
    path = write_config(tmp_path, f"[display]\n{display}\n")

    cfg = load_config(path)

    assert cfg.display == DisplayConfig()
    assert "Invalid display configuration" in capsys.readouterr().out


def test_display_validate_accepts_defaults():
    DisplayConfig().validate()
    DisplayConfig(full_limit=0, medium_limit=0, medium_rows=0, sample_divisor=1).validate()
