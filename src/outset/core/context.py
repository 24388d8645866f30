"""Application context with dependency injection."""

import getpass
import os
from dataclasses import dataclass
from pathlib import Path

from outset.core.disk_image import DiskImage, DryRunDiskImage, RealDiskImage
from outset.core.filesystem import DryRunFilesystem, Filesystem, RealFilesystem
from outset.core.installer import DryRunInstaller, Installer, RealInstaller
from outset.core.network import Network, RealNetwork
from outset.core.paths import DEFAULT_ROOT, OutsetPaths
from outset.core.preferences import FilesystemPreferencesStore, PreferencesStore
from outset.core.run_record import (
    DryRunRunRecordStore,
    FilesystemRunRecordStore,
    RunRecordStore,
)
from outset.core.scheduler import Scheduler, ThreadingScheduler
from outset.core.shell import DryRunShell, RealShell, Shell
from outset.core.system_info import RealSystemInfo, SystemInfo
from outset.core.time import RealTime, Time


@dataclass(frozen=True)
class OutsetContext:
    """Immutable context holding all dependencies for outset operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime. Mutable run state
    (the run-record) is never stored here; the pipeline owns it per run.
    """

    filesystem: Filesystem
    shell: Shell
    installer: Installer
    disk_image: DiskImage
    network: Network
    time: Time
    scheduler: Scheduler
    system_info: SystemInfo
    run_record_store: RunRecordStore
    preferences_store: PreferencesStore
    paths: OutsetPaths
    user_name: str
    home: Path
    is_root: bool
    dry_run: bool

    @property
    def run_once_file(self) -> Path:
        """Run-record location for the current user context."""
        return self.paths.run_once_file(
            is_root=self.is_root, user_name=self.user_name, home=self.home
        )


def create_context(*, dry_run: bool, root: Path = DEFAULT_ROOT) -> OutsetContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap mutating integrations with dry-run wrappers that
                 log instead of executing
        root: Base directory of the outset folder layout

    Returns:
        OutsetContext with real implementations, wrapped in dry-run
        wrappers if dry_run=True
    """
    filesystem: Filesystem = RealFilesystem()
    shell: Shell = RealShell()
    installer: Installer = RealInstaller()
    disk_image: DiskImage = RealDiskImage()
    run_record_store: RunRecordStore = FilesystemRunRecordStore()

    if dry_run:
        filesystem = DryRunFilesystem(filesystem)
        shell = DryRunShell()
        installer = DryRunInstaller()
        disk_image = DryRunDiskImage()
        run_record_store = DryRunRunRecordStore(run_record_store)

    system_info = RealSystemInfo()
    is_root = os.geteuid() == 0
    # Root runs on behalf of whoever is at the console
    user_name = system_info.console_user() if is_root else getpass.getuser()
    paths = OutsetPaths.for_root(root)

    return OutsetContext(
        filesystem=filesystem,
        shell=shell,
        installer=installer,
        disk_image=disk_image,
        network=RealNetwork(),
        time=RealTime(),
        scheduler=ThreadingScheduler(),
        system_info=system_info,
        run_record_store=run_record_store,
        preferences_store=FilesystemPreferencesStore(paths.preferences_file),
        paths=paths,
        user_name=user_name,
        home=Path.home(),
        is_root=is_root,
        dry_run=dry_run,
    )
