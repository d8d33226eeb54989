# =============================================================================
# test_config.py - Tool Configuration Tests
# =============================================================================
# Tests for AssemblerConfig defaults and environment overrides.
# =============================================================================

import logging

import pytest

from smallc_asm.config import AssemblerConfig


ENV_VARS = (
    "SMALLC_ASM_VERBOSE",
    "SMALLC_ASM_LOG_LEVEL",
    "SMALLC_ASM_INDENT",
    "SMALLC_ASM_ENCODING",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_defaults(self):
        config = AssemblerConfig()
        assert config.verbose is False
        assert config.log_level == "WARNING"
        assert config.indent == "  "
        assert config.bytecode_suffix == ".hex"
        assert config.debug_suffix == ".dbg.json"
        assert config.encoding == "utf-8"

    def test_from_env_without_variables(self):
        assert AssemblerConfig.from_env() == AssemblerConfig()


class TestFromEnv:
    """Environment overrides."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
    def test_verbose(self, monkeypatch, value):
        monkeypatch.setenv("SMALLC_ASM_VERBOSE", value)
        assert AssemblerConfig.from_env().verbose is True

    def test_verbose_off(self, monkeypatch):
        monkeypatch.setenv("SMALLC_ASM_VERBOSE", "0")
        assert AssemblerConfig.from_env().verbose is False

    def test_log_level(self, monkeypatch):
        monkeypatch.setenv("SMALLC_ASM_LOG_LEVEL", "info")
        assert AssemblerConfig.from_env().log_level == "INFO"

    def test_indent(self, monkeypatch):
        monkeypatch.setenv("SMALLC_ASM_INDENT", "4")
        assert AssemblerConfig.from_env().indent == "    "

    def test_encoding(self, monkeypatch):
        monkeypatch.setenv("SMALLC_ASM_ENCODING", "latin-1")
        assert AssemblerConfig.from_env().encoding == "latin-1"

    @pytest.mark.parametrize("name,value,field", [
        ("SMALLC_ASM_VERBOSE", "maybe", "verbose"),
        ("SMALLC_ASM_LOG_LEVEL", "LOUD", "log_level"),
        ("SMALLC_ASM_INDENT", "wide", "indent"),
        ("SMALLC_ASM_INDENT", "-2", "indent"),
        ("SMALLC_ASM_ENCODING", "no-such-codec", "encoding"),
    ])
    def test_invalid_value_keeps_default(self, monkeypatch, caplog, name, value, field):
        monkeypatch.setenv(name, value)
        with caplog.at_level(logging.WARNING):
            config = AssemblerConfig.from_env()
        assert getattr(config, field) == getattr(AssemblerConfig(), field)
        assert f"Invalid {name}" in caplog.text
