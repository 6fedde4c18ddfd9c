from __future__ import annotations

import fcntl
import json
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class ConfigStore(Protocol):
    """Key/value persistence for the token endpoint and refresh token."""

    def load(self) -> Mapping[str, str] | None:
        """Return the whole configuration, or None if it cannot be loaded."""
        ...

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryConfigStore:
    """Dictionary-backed store, used for embedding and tests."""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] | None = dict(values) if values is not None else None

    def load(self) -> Mapping[str, str] | None:
        if self._values is None:
            return None
        return dict(self._values)

    def get(self, key: str) -> str | None:
        if self._values is None:
            return None
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        if self._values is None:
            self._values = {}
        self._values[key] = value


class JsonConfigStore:
    """Store backed by a JSON object file.

    Reads are uncached so a value rotated by another process is picked up on
    the next call. Writes are read-modify-write with an atomic replace.
    """

    def __init__(self, path: str | os.PathLike[str]):
        """Initialize the JsonConfigStore.

        Args:
            path: Path to the configuration file.
        """
        if not isinstance(path, str | os.PathLike):
            raise TypeError("path must be str or os.PathLike")
        self.path = str(path)

    def load(self) -> Mapping[str, str] | None:
        """Load the configuration object from disk.

        Returns:
            Mapping of string keys to string values, or None when the file is
            missing, unreadable, or does not hold a JSON object.
        """
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as e:
            logging.error(f"💥 Configuration load error path={self.path} error={e}")
            return None
        if not isinstance(data, dict):
            logging.error(
                f"💥 Configuration is not a JSON object path={self.path} type={type(data).__name__}"
            )
            return None
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> str | None:
        data = self.load()
        if data is None:
            return None
        return data.get(key)

    def set(self, key: str, value: str) -> None:
        """Persist a single key, keeping the rest of the file intact."""
        current = dict(self._load_for_update())
        current[key] = value
        self._prepare_dir()
        self._atomic_write(current)
        logging.debug(f"💾 Config key updated key={key}")

    def _load_for_update(self) -> dict[str, object]:
        # Keep non-string values written by other tools.
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logging.warning(f"⚠️ Overwriting unreadable configuration path={self.path} error={e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _prepare_dir(self) -> None:
        """Create the configuration directory if it doesn't exist."""
        config_dir = os.path.dirname(self.path)
        if config_dir and not os.path.exists(config_dir):
            os.makedirs(config_dir, mode=0o700, exist_ok=True)

    def _atomic_write(self, data: dict[str, object]) -> None:
        """Write configuration data via a temp file and rename.

        Args:
            data: Configuration data to write.
        """
        config_path = Path(self.path)
        lock_path = config_path.with_suffix(config_path.suffix + ".lock")
        temp_path: str | None = None
        try:
            with open(lock_path, "w", encoding="utf-8") as lock_file:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
                with tempfile.NamedTemporaryFile(
                    mode="w",
                    dir=config_path.parent,
                    prefix=f".{config_path.name}.",
                    suffix=".tmp",
                    delete=False,
                    encoding="utf-8",
                ) as tmp:
                    json.dump(data, tmp, indent=2)
                    tmp.flush()
                    os.fsync(tmp.fileno())
                    temp_path = tmp.name
                # Holds a bearer credential
                os.chmod(temp_path, 0o600)
                os.replace(temp_path, self.path)
        except (OSError, ValueError) as e:
            if temp_path and os.path.exists(temp_path):
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
            logging.error(f"💥 Atomic config save failed: {type(e).__name__}")
            raise
        finally:
            try:
                os.unlink(lock_path)
            except OSError:
                pass
