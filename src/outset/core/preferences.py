"""Process-wide preferences.

Preferences live in the shared folder so every user context sees the same
settings. They are read when a command first needs them, written with
defaults if absent, and only changed by the administrative commands.
"""

import logging
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import tomlkit

from outset.core.run_record import (
    RUN_RECORD_TABLE,
    decode_timestamp_table,
    encode_timestamp_table,
)

logger = logging.getLogger(__name__)

DEFAULT_NETWORK_TIMEOUT = 180


@dataclass(frozen=True)
class Preferences:
    """Immutable preference data.

    Attributes:
        wait_for_network: Hold the boot run until the network is up
        network_timeout: Seconds to wait for the network
        ignored_users: Users whose logins skip login processing
        override_login_once: Path -> time; re-run once-items recorded before it
    """

    wait_for_network: bool = False
    network_timeout: int = DEFAULT_NETWORK_TIMEOUT
    ignored_users: list[str] = field(default_factory=list)
    override_login_once: dict[str, datetime] = field(default_factory=dict)


def parse_preferences(data: dict, source: Path) -> Preferences:
    """Build Preferences from a decoded TOML document.

    Raises:
        ValueError: If a key has the wrong type
    """
    wait = data.get("wait_for_network", False)
    if not isinstance(wait, bool):
        raise ValueError(f"'wait_for_network' in {source} must be a boolean")
    timeout = data.get("network_timeout", DEFAULT_NETWORK_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 0:
        raise ValueError(f"'network_timeout' in {source} must be a non-negative integer")
    users = data.get("ignored_users", [])
    if not isinstance(users, list) or not all(isinstance(u, str) for u in users):
        raise ValueError(f"'ignored_users' in {source} must be a list of strings")
    overrides = decode_timestamp_table(data.get(RUN_RECORD_TABLE, {}), source)
    return Preferences(
        wait_for_network=wait,
        network_timeout=timeout,
        ignored_users=list(users),
        override_login_once=overrides,
    )


def render_preferences(prefs: Preferences) -> str:
    doc = tomlkit.document()
    doc.add(tomlkit.comment("outset preferences"))
    doc["wait_for_network"] = prefs.wait_for_network
    doc["network_timeout"] = prefs.network_timeout
    doc["ignored_users"] = list(prefs.ignored_users)
    doc[RUN_RECORD_TABLE] = encode_timestamp_table(prefs.override_login_once)
    return tomlkit.dumps(doc)


class PreferencesStore(ABC):
    """Abstract interface for preference access.

    Provides dependency injection for preferences, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if preferences have been written."""
        ...

    @abstractmethod
    def load(self) -> Preferences:
        """Load preferences, writing the defaults first if none exist.

        Unreadable preferences are logged and replaced by defaults in memory.
        """
        ...

    @abstractmethod
    def save(self, prefs: Preferences) -> bool:
        """Save preferences.

        Returns:
            True if written, False if the write failed (failure is logged)
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Location of the preferences (for messages and debugging)."""
        ...


class FilesystemPreferencesStore(PreferencesStore):
    """Production implementation backed by a TOML file."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def exists(self) -> bool:
        return self._path.exists()

    def load(self) -> Preferences:
        if not self.exists():
            self.save(Preferences())
            return Preferences()
        try:
            data = tomllib.loads(self._path.read_text(encoding="utf-8"))
            return parse_preferences(data, self._path)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError, ValueError) as e:
            logger.error("Preferences import failed for %s: %s", self._path, e)
            return Preferences()

    def save(self, prefs: Preferences) -> bool:
        logger.debug("Writing preference file: %s", self._path)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(render_preferences(prefs), encoding="utf-8")
        except OSError as e:
            logger.error("Writing preference file %s failed: %s", self._path, e)
            return False
        return True

    def path(self) -> Path:
        return self._path


class InMemoryPreferencesStore(PreferencesStore):
    """Test implementation that stores preferences in memory."""

    def __init__(self, prefs: Preferences | None = None) -> None:
        """Initialize in-memory store.

        Args:
            prefs: Initial preferences (None = nothing written yet)
        """
        self._prefs = prefs

    def exists(self) -> bool:
        return self._prefs is not None

    def load(self) -> Preferences:
        if self._prefs is None:
            self._prefs = Preferences()
        return self._prefs

    def save(self, prefs: Preferences) -> bool:
        self._prefs = prefs
        return True

    def path(self) -> Path:
        return Path("/test/preferences.toml")
