"""
Persisted path defaults.

A single JSON record in the per-user config directory. The record is read
once at the start of a run and, if the save policy says so, replaced as a
whole once at the end of path resolution.
"""

import json
from dataclasses import asdict, dataclass, replace
from datetime import datetime
from pathlib import Path

from spalink.config.paths import CONFIG_FILE
from spalink.utils.logging import logger

# Dataclass field -> JSON key
JSON_KEYS = {
    "library_path": "LibraryPath",
    "infinity_path": "InfinityPath",
    "additional_spa_paths": "AdditionalSpaPaths",
    "package_name": "PackageName",
    "updated": "Updated",
}


@dataclass(frozen=True)
class PersistedConfig:
    """Stored defaults. Every field is always present and may be None."""

    library_path: str | None = None
    infinity_path: str | None = None
    additional_spa_paths: str | None = None
    package_name: str | None = None
    updated: str | None = None

    @classmethod
    def from_json(cls, data: dict) -> "PersistedConfig":
        values = {}
        for field_name, key in JSON_KEYS.items():
            value = data.get(key)
            values[field_name] = value if isinstance(value, str) else None
        return cls(**values)

    def to_json(self) -> dict:
        return {JSON_KEYS[name]: value for name, value in asdict(self).items()}

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in asdict(self).values())


class ConfigStore:
    """Loads and saves the PersistedConfig record at a fixed location."""

    def __init__(self, path: Path = CONFIG_FILE, *, save_disabled: bool = False):
        self.path = Path(path)
        self.save_disabled = save_disabled

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> PersistedConfig:
        """
        Read the stored record.

        A missing file is an empty record. An unreadable or malformed file
        is reported as a warning and also treated as empty.
        """
        if not self.path.exists():
            logger.debug(f"No saved config at {self.path}")
            return PersistedConfig()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read saved config {self.path}: {e}")
            return PersistedConfig()

        if not isinstance(data, dict):
            logger.warning(f"Ignoring saved config {self.path}: expected a JSON object")
            return PersistedConfig()

        return PersistedConfig.from_json(data)

    def save(self, config: PersistedConfig) -> PersistedConfig:
        """
        Overwrite the stored record with config, stamped with the current time.

        Returns:
            The record as written (unchanged config if saving is disabled)
        """
        if self.save_disabled:
            logger.info("Config saving disabled (skipped)")
            return config

        stamped = replace(config, updated=datetime.now().isoformat(timespec="seconds"))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(stamped.to_json(), indent=2) + "\n", encoding="utf-8"
        )
        logger.info(f"Saved defaults to {self.path}")
        return stamped

    def clear(self) -> bool:
        """Delete the stored record. Returns False if there was none."""
        if not self.path.exists():
            return False
        self.path.unlink()
        logger.info(f"Removed {self.path}")
        return True
