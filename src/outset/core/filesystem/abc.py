"""Filesystem operations interface.

Ownership and permission checks need a root-owned tree, which tests cannot
create. Routing every filesystem touch through this interface lets the fake
report whatever owner and mode a test needs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileAttributes:
    """Owner and permission bits of a filesystem item.

    Attributes:
        owner_id: Numeric uid of the owner
        mode: Permission bits only (``stat.S_IMODE``), e.g. ``0o755``
    """

    owner_id: int
    mode: int


class Filesystem(ABC):
    """Abstract interface for the filesystem queries and mutations outset needs."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Check if path exists (file or directory)."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Check if path is a directory."""
        ...

    @abstractmethod
    def attributes(self, path: Path) -> FileAttributes:
        """Read owner id and permission bits of path.

        Raises:
            OSError: If the attributes cannot be read
        """
        ...

    @abstractmethod
    def list_dir(self, path: Path) -> list[Path]:
        """List immediate children of path in enumeration order.

        Returns:
            Child paths, or an empty list if path cannot be enumerated
        """
        ...

    @abstractmethod
    def remove(self, path: Path) -> None:
        """Remove a file, or a directory with everything below it.

        Raises:
            OSError: If removal fails
        """
        ...

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create path and any missing parents.

        Raises:
            OSError: If the directory cannot be created
        """
        ...
