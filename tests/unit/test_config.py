"""Unit tests for config.py"""

import pytest

from mdrender.config import RenderOptions, load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)
    for name in ("OUTPUT_DIR", "OUTPUT_EXT", "LOG_LEVEL", "RTL_SUPPORT", "CODE_HIGHLIGHT"):
        monkeypatch.delenv(f"MDRENDER_{name}", raising=False)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.output_dir == "dist"
    assert settings.output_ext == "html"
    assert settings.log_level == "WARNING"
    assert settings.render_options() == RenderOptions()


def test_load_config_reads_config_yaml(tmp_path):
    """Values from config.yaml override defaults."""
    (tmp_path / "config.yaml").write_text("output_dir: site\nrtl_support: false\n")
    settings = load_config()
    assert settings.output_dir == "site"
    assert settings.rtl_support is False


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDRENDER_OUTPUT_DIR takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("output_dir: site\n")
    monkeypatch.setenv("MDRENDER_OUTPUT_DIR", "env-out")
    assert load_config().output_dir == "env-out"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDRENDER_OUTPUT_DIR", "env-out")
    settings = load_config(overrides={"output_dir": "cli-out", "output_ext": None})
    assert settings.output_dir == "cli-out"
    assert settings.output_ext == "html"


def test_load_config_env_bool_coerced(monkeypatch):
    """Boolean flags accept string env values."""
    monkeypatch.setenv("MDRENDER_CODE_HIGHLIGHT", "false")
    assert load_config().render_options().code_highlight is False


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    """A config.yaml that is not a mapping is rejected."""
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_invalid_value(monkeypatch):
    """A value outside the allowed pattern raises ValueError."""
    monkeypatch.setenv("MDRENDER_OUTPUT_EXT", "pdf")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config()
