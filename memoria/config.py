"""Reading the memory module's configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_KEY_PORT = "PUERTO_ESCUCHA"
_KEY_MEMORY_SIZE = "TAM_MEMORIA"
_KEY_PAGE_SIZE = "TAM_PAGINA"
_KEY_INSTRUCTIONS_PATH = "PATH_INSTRUCCIONES"
_KEY_RESPONSE_DELAY = "RETARDO_RESPUESTA"


class ConfigError(ValueError):
    """Raised when the configuration is missing a key or holds a bad value."""


@dataclass(frozen=True)
class MemoryConfig:
    """Settings of the memory module."""

    port: str
    memory_size: int
    page_size: int
    instructions_path: str
    response_delay: int

    @property
    def response_delay_seconds(self) -> float:
        """The response delay, which is given in milliseconds, in seconds."""
        return self.response_delay / 1000


def _parse_entries(text: str) -> dict[str, str]:
    entries: dict[str, str] = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ConfigError(f"malformed configuration line: {raw!r}")
        entries[key.strip()] = value.strip()
    return entries


def _require(entries: dict[str, str], key: str) -> str:
    try:
        return entries[key]
    except KeyError:
        raise ConfigError(f"missing configuration key: {key}") from None


def _require_int(entries: dict[str, str], key: str) -> int:
    value = _require(entries, key)
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{key} is not an integer: {value!r}") from None


def parse_config(text: str) -> MemoryConfig:
    """Parse KEY=VALUE configuration text into a MemoryConfig."""
    entries = _parse_entries(text)
    port = _require(entries, _KEY_PORT)
    memory_size = _require_int(entries, _KEY_MEMORY_SIZE)
    page_size = _require_int(entries, _KEY_PAGE_SIZE)
    if page_size <= 0:
        raise ConfigError(f"{_KEY_PAGE_SIZE} must be positive: {page_size}")
    if memory_size < 0:
        raise ConfigError(f"{_KEY_MEMORY_SIZE} must not be negative: {memory_size}")
    instructions_path = _require(entries, _KEY_INSTRUCTIONS_PATH)
    if instructions_path.endswith("/"):
        instructions_path = instructions_path[:-1]
    response_delay = _require_int(entries, _KEY_RESPONSE_DELAY)
    return MemoryConfig(
        port=port,
        memory_size=memory_size,
        page_size=page_size,
        instructions_path=instructions_path,
        response_delay=response_delay,
    )


def load_config(path: str | os.PathLike[str]) -> MemoryConfig:
    """Read a configuration file and check that its instructions directory exists."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration file {path}: {exc}") from exc
    config = parse_config(text)
    if config.instructions_path and not Path(config.instructions_path).is_dir():
        raise ConfigError(
            f"cannot open the instructions directory: {config.instructions_path}"
        )
    return config