import logging
import os
from pathlib import Path
from typing import Optional

from linux_fingerprint.commands import CommandRunner, run_command
from linux_fingerprint.config import Settings, settings
from linux_fingerprint.fallback import first_resolved

logger = logging.getLogger(__name__)

def canonical_path(path: str) -> str:
    """
    Fully resolve symlinks in path; return path unchanged if that fails.
    """
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError) as e:
        logger.debug("Cannot resolve %s: %s", path, e)
        return path

class RootfsUUIDResolver:
    """
    Maps a block device path to its filesystem UUID.

    The by-uuid symlink directory is preferred since it needs no external
    binary; blkid covers filesystems the kernel does not index there.
    """

    def __init__(self, config: Optional[Settings] = None, run: CommandRunner = run_command):
        self.config = config or settings
        self.run = run

    def from_by_uuid(self, device: str) -> str:
        by_uuid = self.config.DISK_BY_UUID_DIR
        try:
            entries = list(os.scandir(by_uuid))
        except OSError as e:
            logger.debug("Cannot list %s: %s", by_uuid, e)
            return ""

        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                continue

            try:
                target = os.readlink(entry.path)
            except OSError:
                continue

            if not os.path.isabs(target):
                target = os.path.join(by_uuid, target)

            try:
                resolved = str(Path(target).resolve(strict=True))
            except (OSError, RuntimeError):
                continue

            if resolved == device:
                return entry.name

        return ""

    def from_blkid(self, device: str) -> str:
        return self.run(
            [self.config.BLKID_BINARY, "-s", "UUID", "-o", "value", device],
            self.config.PROBE_TIMEOUT_SECONDS,
        )

    def resolve(self, device: str) -> str:
        if not device:
            return ""

        real_device = canonical_path(device)
        return first_resolved(
            [
                ("by-uuid links", lambda: self.from_by_uuid(real_device)),
                ("blkid", lambda: self.from_blkid(device)),
            ],
            what=f"filesystem uuid of {device}",
        )

def get_rootfs_uuid(device: str, config: Optional[Settings] = None) -> str:
    return RootfsUUIDResolver(config).resolve(device)
