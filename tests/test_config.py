"""Tests for oidbridge configuration loading."""

from __future__ import annotations

import pytest

from oidbridge.config import OidBridgeConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("OIDBRIDGE_FILLER", raising=False)


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path):
        config = load_config(tmp_path / "missing.ini")
        assert config == OidBridgeConfig()
        assert config.filler == "0000"

    def test_reads_ini(self, tmp_path):
        path = tmp_path / "oidbridge.ini"
        path.write_text("[encoding]\nfiller = abcd\n")
        assert load_config(path).filler == "abcd"

    def test_ini_without_section(self, tmp_path):
        path = tmp_path / "oidbridge.ini"
        path.write_text("[other]\nfiller = abcd\n")
        assert load_config(path).filler == "0000"

    def test_env_overrides_ini(self, tmp_path, monkeypatch):
        path = tmp_path / "oidbridge.ini"
        path.write_text("[encoding]\nfiller = abcd\n")
        monkeypatch.setenv("OIDBRIDGE_FILLER", "1234")
        assert load_config(path).filler == "1234"

    def test_empty_env_ignored(self, tmp_path, monkeypatch):
        monkeypatch.setenv("OIDBRIDGE_FILLER", "")
        assert load_config(tmp_path / "missing.ini").filler == "0000"

    def test_immutable(self):
        config = OidBridgeConfig()
        with pytest.raises(AttributeError):
            config.filler = "ffff"
