"""Runtime settings — env-driven parameters for the operator CLI.

Uses pydantic-settings for environment variable support.  Reads from a
.env file and BZZCONFIG_* environment variables.  The config subsystem
itself takes explicit arguments; only the CLI consults these settings.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from bzzconfig.models.document import ZERO_ADDRESS, Address


class NodeSettings(BaseSettings):
    """Node settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BZZCONFIG_DATADIR=/data/livepeernet/livepeer
        export BZZCONFIG_NETWORK_ID=326326
        export BZZCONFIG_KEY_FILE=/etc/livepeer/node.key

    Or via .env file::

        BZZCONFIG_RTMP_PORT=1935
        BZZCONFIG_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BZZCONFIG_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Base data directory; node directories are created beneath it
    datadir: Path = Path("~/.livepeer")
    network_id: int = 326326
    contract: Address = ZERO_ADDRESS

    # Passthrough values
    rtmp_port: str = "1935"
    ffmpeg_path: str = "ffmpeg"

    # File holding the hex-encoded private key
    key_file: Path | None = None

    log_level: str = "INFO"

    @property
    def resolved_datadir(self) -> Path:
        """``datadir`` with ``~`` expanded."""
        return self.datadir.expanduser()
