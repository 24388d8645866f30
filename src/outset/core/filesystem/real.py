"""Production filesystem operations backed by os and shutil."""

import os
import shutil
import stat
from pathlib import Path

from outset.core.filesystem.abc import FileAttributes, Filesystem


class RealFilesystem(Filesystem):
    """Filesystem operations against the local disk.

    Attributes are read with ``lstat`` so a symlink is judged on its own
    ownership and mode rather than on its target's.
    """

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def attributes(self, path: Path) -> FileAttributes:
        st = os.lstat(path)
        return FileAttributes(owner_id=st.st_uid, mode=stat.S_IMODE(st.st_mode))

    def list_dir(self, path: Path) -> list[Path]:
        try:
            return list(path.iterdir())
        except OSError:
            return []

    def remove(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()

    def make_dirs(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
