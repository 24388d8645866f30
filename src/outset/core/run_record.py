"""Once-run record persistence.

The run-record maps an item path to the UTC time it last completed
successfully in once-mode. It is stored as a TOML document with a single
``[override_login_once]`` table, the same table name the preferences file
uses for administrator overrides.
"""

import logging
import tomllib
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import tomlkit

logger = logging.getLogger(__name__)

RUN_RECORD_TABLE = "override_login_once"

RunRecord = dict[str, datetime]


def normalize_timestamp(value: datetime) -> datetime:
    """Return value as an aware UTC datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def decode_timestamp_table(raw: Any, source: Path) -> dict[str, datetime]:
    """Validate a TOML table of path -> datetime.

    Raises:
        ValueError: If raw is not a table or holds a non-datetime value
    """
    if not isinstance(raw, dict):
        raise ValueError(f"'{RUN_RECORD_TABLE}' in {source} is not a table")
    decoded: dict[str, datetime] = {}
    for key, value in raw.items():
        if not isinstance(value, datetime):
            raise ValueError(f"Entry '{key}' in {source} is not a date-time")
        decoded[str(key)] = normalize_timestamp(value)
    return decoded


def encode_timestamp_table(values: dict[str, datetime]) -> Any:
    table = tomlkit.table()
    for key, value in values.items():
        table[key] = normalize_timestamp(value)
    return table


class RunRecordStore(ABC):
    """Abstract interface for loading and persisting the run-record.

    Provides dependency injection for run-record access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def load(self, path: Path) -> RunRecord:
        """Load the run-record stored at path.

        A missing or undecodable record yields an empty mapping; corrupt state
        is discarded (and logged) rather than raised.
        """
        ...

    @abstractmethod
    def save(self, path: Path, record: RunRecord) -> bool:
        """Overwrite the run-record at path.

        Returns:
            True if written, False if the write failed (failure is logged)
        """
        ...


class FilesystemRunRecordStore(RunRecordStore):
    """Production implementation reading and writing TOML files."""

    def load(self, path: Path) -> RunRecord:
        if not path.exists():
            return {}
        try:
            data = tomllib.loads(path.read_text(encoding="utf-8"))
            return decode_timestamp_table(data.get(RUN_RECORD_TABLE, {}), path)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValueError) as e:
            logger.error("Could not load run-once record %s, starting empty: %s", path, e)
            return {}

    def save(self, path: Path, record: RunRecord) -> bool:
        logger.debug("Writing run-once record: %s", path)
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Items outset has run once, with the time each completed"))
        doc[RUN_RECORD_TABLE] = encode_timestamp_table(record)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        except OSError as e:
            logger.error("Writing to %s failed: %s", path, e)
            return False
        return True


class InMemoryRunRecordStore(RunRecordStore):
    """Test implementation keeping records per path in memory."""

    def __init__(self, records: dict[Path, RunRecord] | None = None) -> None:
        """Initialize in-memory store.

        Args:
            records: Initial records keyed by file path (None = nothing stored)
        """
        self._records = {path: dict(record) for path, record in (records or {}).items()}
        self._save_calls: list[tuple[Path, RunRecord]] = []

    def load(self, path: Path) -> RunRecord:
        return dict(self._records.get(path, {}))

    def save(self, path: Path, record: RunRecord) -> bool:
        self._records[path] = dict(record)
        self._save_calls.append((path, dict(record)))
        return True

    def stored(self, path: Path) -> RunRecord | None:
        """Record currently stored at path, for test assertions."""
        record = self._records.get(path)
        return dict(record) if record is not None else None

    @property
    def save_calls(self) -> list[tuple[Path, RunRecord]]:
        """Get the list of save() calls that were made.

        This property is for test assertions only.
        """
        return list(self._save_calls)


class DryRunRunRecordStore(RunRecordStore):
    """Reads through to the wrapped store and logs writes instead of saving."""

    def __init__(self, wrapped: RunRecordStore) -> None:
        self._wrapped = wrapped

    def load(self, path: Path) -> RunRecord:
        return self._wrapped.load(path)

    def save(self, path: Path, record: RunRecord) -> bool:
        logger.info("[dry-run] Would write %d entries to %s", len(record), path)
        return True
