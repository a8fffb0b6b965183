"""Config store — reads and writes ``config.json`` in the node directory.

Storage layout: {base_path}/bzz-{fingerprint}/config.json

Writes go to a temporary file in the same directory which then replaces
``config.json``, so an existing valid file is never left truncated.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from bzzconfig.models.config import NodeConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"


class ConfigError(RuntimeError):
    """Base class for node configuration failures.

    Parameters
    ----------
    message:
        Human-readable description.
    path:
        The file or directory involved, when there is one.
    """

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class ConfigNotFound(ConfigError):
    """Raised by :func:`load` when no config file exists yet."""


class DirectoryCreationFailed(ConfigError):
    """Raised when the node directory cannot be created."""


class FileReadFailed(ConfigError):
    """Raised when an existing config file cannot be read."""


class PersistFailed(ConfigError):
    """Raised when the config document cannot be serialized or written."""


def config_path(directory: Path | str) -> Path:
    """Return the config file path inside a node directory."""
    return Path(directory) / CONFIG_FILENAME


def ensure_directory(path: Path | str) -> Path:
    """Create *path* and its parents if absent.  Idempotent."""
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationFailed(
            f"cannot create config directory {directory}: {exc}", path=directory
        ) from exc
    return directory


def load(path: Path | str) -> bytes:
    """Read the raw bytes of a config file.

    Raises
    ------
    ConfigNotFound
        If the file does not exist.
    FileReadFailed
        For any other I/O error (permissions, path is a directory, ...).
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except FileNotFoundError as exc:
        raise ConfigNotFound(f"no config file at {path}", path=path) from exc
    except OSError as exc:
        raise FileReadFailed(f"cannot read config {path}: {exc}", path=path) from exc


def dumps(document: dict[str, Any]) -> str:
    """Render a document as indented JSON, keeping its key order."""
    return json.dumps(document, indent=4, ensure_ascii=False)


def write_document(directory: Path | str, document: dict[str, Any]) -> Path:
    """Atomically write *document* to ``<directory>/config.json``."""
    directory = Path(directory)
    target = config_path(directory)
    try:
        content = dumps(document).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise PersistFailed(f"cannot serialize config: {exc}", path=target) from exc

    try:
        ensure_directory(directory)
    except DirectoryCreationFailed as exc:
        raise PersistFailed(str(exc), path=target) from exc

    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=str(directory), suffix=".tmp", prefix=".config_"
        )
    except OSError as exc:
        raise PersistFailed(f"cannot write config {target}: {exc}", path=target) from exc
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_path, target)
    except OSError as exc:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise PersistFailed(f"cannot write config {target}: {exc}", path=target) from exc

    logger.debug("Wrote config %s (%d bytes)", target, len(content))
    return target


def save(config: NodeConfig) -> Path:
    """Persist *config* to ``<config.path>/config.json``."""
    return write_document(config.path, config.to_document())
