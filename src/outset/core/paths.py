"""Filesystem layout used by outset.

All locations are derived from a single root so that tests can build the
whole tree under a temporary directory.
"""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_ROOT = Path("/usr/local/outset")

PREFERENCES_FILENAME = "com.chilcote.outset.toml"
RUN_ONCE_FILENAME = "com.github.outset.once.toml"


@dataclass(frozen=True)
class OutsetPaths:
    """Immutable set of directories and files outset reads and writes."""

    root: Path
    boot_every: Path
    boot_once: Path
    login_every: Path
    login_once: Path
    login_privileged_every: Path
    login_privileged_once: Path
    on_demand: Path
    share: Path
    logs: Path

    @staticmethod
    def for_root(root: Path) -> "OutsetPaths":
        """Build the standard layout beneath root."""
        return OutsetPaths(
            root=root,
            boot_every=root / "boot-every",
            boot_once=root / "boot-once",
            login_every=root / "login-every",
            login_once=root / "login-once",
            login_privileged_every=root / "login-privileged-every",
            login_privileged_once=root / "login-privileged-once",
            on_demand=root / "on-demand",
            share=root / "share",
            logs=root / "logs",
        )

    @property
    def working_directories(self) -> list[Path]:
        """Directories created by ``ensure_working_folders``."""
        return [
            self.boot_every,
            self.boot_once,
            self.login_every,
            self.login_once,
            self.login_privileged_every,
            self.login_privileged_once,
            self.on_demand,
            self.share,
            self.logs,
        ]

    @property
    def preferences_file(self) -> Path:
        return self.share / PREFERENCES_FILENAME

    def run_once_file(self, *, is_root: bool, user_name: str, home: Path) -> Path:
        """Location of the once-run record.

        Root keeps one record per console user in the shared folder; a regular
        user keeps theirs in ~/Library/Preferences.
        """
        if is_root:
            stem = RUN_ONCE_FILENAME.removesuffix(".toml")
            return self.share / f"{stem}.{user_name}.toml"
        return home / "Library" / "Preferences" / RUN_ONCE_FILENAME
