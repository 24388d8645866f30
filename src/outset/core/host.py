"""Host preparation around a processing run.

Folder creation, waiting for the network, toggling the login window and
logging a short system report.
"""

import logging

from outset.core.context import OutsetContext

logger = logging.getLogger(__name__)

NETWORK_POLL_INTERVAL = 10
LOGINWINDOW_PLIST = "/System/Library/LaunchDaemons/com.apple.loginwindow.plist"
LAUNCHCTL = "/bin/launchctl"


def ensure_working_folders(ctx: OutsetContext) -> None:
    for directory in ctx.paths.working_directories:
        if ctx.filesystem.is_dir(directory):
            continue
        logger.debug("%s does not exist, creating now.", directory)
        try:
            ctx.filesystem.make_dirs(directory)
        except OSError as e:
            logger.error("Could not create path at %s: %s", directory, e)


def ensure_shared_folder(ctx: OutsetContext) -> None:
    share = ctx.paths.share
    if ctx.filesystem.exists(share):
        return
    logger.info("%s does not exist, creating now.", share)
    try:
        ctx.filesystem.make_dirs(share)
    except OSError as e:
        logger.error("Something went wrong. %s could not be created: %s", share, e)


def wait_for_network(ctx: OutsetContext, timeout: int) -> bool:
    """Poll reachability until it is up or timeout seconds have been waited.

    Returns:
        True if the network came up, False once the timeout is spent
    """
    waited = 0
    while True:
        if ctx.network.is_up():
            return True
        if waited >= timeout:
            return False
        step = min(NETWORK_POLL_INTERVAL, timeout - waited)
        ctx.time.sleep(step)
        waited += step


def _launchctl(ctx: OutsetContext, action: str) -> None:
    result = ctx.shell.run_command([LAUNCHCTL, action, LOGINWINDOW_PLIST])
    if not result.success:
        logger.error("launchctl %s of loginwindow failed: %s", action, result.stderr.strip())


def disable_loginwindow(ctx: OutsetContext) -> None:
    logger.info("Disabling loginwindow process")
    _launchctl(ctx, "unload")


def enable_loginwindow(ctx: OutsetContext) -> None:
    logger.info("Enabling loginwindow process")
    _launchctl(ctx, "load")


def sys_report(ctx: OutsetContext) -> None:
    """Log model, serial, OS version and build at debug level."""
    info = ctx.system_info
    for label, query in (
        ("Model", info.hardware_model),
        ("Serial", info.serial_number),
        ("OS", info.os_version),
        ("Build", info.build_version),
    ):
        try:
            logger.debug("%s: %s", label, query())
        except RuntimeError as e:
            logger.debug("%s: unavailable (%s)", label, e)
