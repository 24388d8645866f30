"""Factory functions for creating test contexts."""

from pathlib import Path

from outset.core.context import OutsetContext
from outset.core.disk_image.abc import DiskImage
from outset.core.filesystem.abc import Filesystem
from outset.core.installer.abc import Installer
from outset.core.network.abc import Network
from outset.core.paths import OutsetPaths
from outset.core.preferences import InMemoryPreferencesStore, PreferencesStore
from outset.core.run_record import InMemoryRunRecordStore, RunRecordStore
from outset.core.scheduler import Scheduler
from outset.core.shell.abc import Shell
from outset.core.system_info import SystemInfo
from outset.core.time.abc import Time
from tests.fakes.disk_image import FakeDiskImage
from tests.fakes.filesystem import FakeFilesystem
from tests.fakes.installer import FakeInstaller
from tests.fakes.network import FakeNetwork
from tests.fakes.scheduler import FakeScheduler
from tests.fakes.shell import FakeShell
from tests.fakes.system_info import FakeSystemInfo
from tests.fakes.time import FakeTime

TEST_ROOT = Path("/usr/local/outset")
TEST_HOME = Path("/Users/tester")


def create_test_context(
    filesystem: Filesystem | None = None,
    shell: Shell | None = None,
    installer: Installer | None = None,
    disk_image: DiskImage | None = None,
    network: Network | None = None,
    time: Time | None = None,
    scheduler: Scheduler | None = None,
    system_info: SystemInfo | None = None,
    run_record_store: RunRecordStore | None = None,
    preferences_store: PreferencesStore | None = None,
    paths: OutsetPaths | None = None,
    user_name: str = "tester",
    home: Path = TEST_HOME,
    is_root: bool = False,
    dry_run: bool = False,
) -> OutsetContext:
    """Create test context with optional pre-configured fakes.

    Any dependency left as None gets an empty fake. Paths default to the
    standard layout under /usr/local/outset, which only exists inside the
    fake filesystem.
    """
    return OutsetContext(
        filesystem=filesystem if filesystem is not None else FakeFilesystem(),
        shell=shell if shell is not None else FakeShell(),
        installer=installer if installer is not None else FakeInstaller(),
        disk_image=disk_image if disk_image is not None else FakeDiskImage(),
        network=network if network is not None else FakeNetwork(),
        time=time if time is not None else FakeTime(),
        scheduler=scheduler if scheduler is not None else FakeScheduler(),
        system_info=system_info if system_info is not None else FakeSystemInfo(),
        run_record_store=(
            run_record_store if run_record_store is not None else InMemoryRunRecordStore()
        ),
        preferences_store=(
            preferences_store if preferences_store is not None else InMemoryPreferencesStore()
        ),
        paths=paths if paths is not None else OutsetPaths.for_root(TEST_ROOT),
        user_name=user_name,
        home=home,
        is_root=is_root,
        dry_run=dry_run,
    )
