"""Tests for runtime settings — env-driven CLI defaults."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from bzzconfig.models.document import ZERO_ADDRESS
from bzzconfig.settings import NodeSettings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep a developer's .env and BZZCONFIG_* variables out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "DATADIR", "NETWORK_ID", "CONTRACT", "RTMP_PORT",
        "FFMPEG_PATH", "KEY_FILE", "LOG_LEVEL",
    ):  # fmt: skip
        monkeypatch.delenv(f"BZZCONFIG_{name}", raising=False)


class TestNodeSettings:
    def test_defaults(self):
        settings = NodeSettings()
        assert settings.datadir == Path("~/.livepeer")
        assert settings.network_id == 326326
        assert settings.contract == ZERO_ADDRESS
        assert settings.rtmp_port == "1935"
        assert settings.key_file is None
        assert settings.log_level == "INFO"

    def test_resolved_datadir_expands_user(self):
        settings = NodeSettings(datadir=Path("~/nodes"))
        assert settings.resolved_datadir == Path("~/nodes").expanduser()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BZZCONFIG_NETWORK_ID", "7")
        monkeypatch.setenv("BZZCONFIG_DATADIR", "/srv/livepeernet/livepeer")
        settings = NodeSettings()
        assert settings.network_id == 7
        assert settings.datadir == Path("/srv/livepeernet/livepeer")

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("BZZCONFIG_RTMP_PORT=2935\n")
        assert NodeSettings().rtmp_port == "2935"

    def test_contract_validated(self):
        with pytest.raises(ValidationError):
            NodeSettings(contract="0xnope")

    def test_contract_normalized(self):
        settings = NodeSettings(contract="AB" * 20)
        assert settings.contract == "0x" + "ab" * 20
