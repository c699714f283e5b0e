"""
Root mount lookup in the live mount table.

mountinfo records look like:

    36 35 98:0 /mnt1 /mnt2 rw,noatime master:1 - ext3 /dev/root rw,errors=continue

The optional fields before the " - " separator vary in number, so the
record is split there first: the left half carries the mount point as its
fifth field, the right half starts with filesystem type and source.
"""
import logging
from typing import NamedTuple, Optional, Tuple

from linux_fingerprint.config import settings

logger = logging.getLogger(__name__)

SEPARATOR = " - "
ROOT_MOUNT_POINT = "/"

class MountRecord(NamedTuple):
    mount_point: str
    fstype: str
    source: str

def parse_mountinfo_line(line: str) -> Optional[MountRecord]:
    """Parse one mountinfo record, or return None if it is malformed."""
    halves = line.split(SEPARATOR)
    if len(halves) != 2:
        return None

    left, right = halves[0].split(), halves[1].split()
    if len(left) < 5:
        return None

    fstype = right[0] if len(right) >= 1 else ""
    source = right[1] if len(right) >= 2 else ""
    return MountRecord(mount_point=left[4], fstype=fstype, source=source)

def find_root_mount(path: str = settings.MOUNTINFO_PATH) -> Tuple[str, str]:
    """
    Return (source, fstype) of the first record mounted at "/".

    Layered root mounts can produce several such records; the first one
    wins. ("", "") when the table is unreadable or has no root record.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                record = parse_mountinfo_line(line.rstrip("\n"))
                if record is None or record.mount_point != ROOT_MOUNT_POINT:
                    continue

                if not record.source:
                    # Incomplete right-hand side; keep both halves empty
                    return "", ""
                return record.source, record.fstype
    except OSError as e:
        logger.debug("Cannot read mount table %s: %s", path, e)
        return "", ""

    logger.debug("No root mount record in %s", path)
    return "", ""
