"""
Single-source probes: each reads one file (or one OS call) and extracts one
value. An absent or unreadable source is a normal empty result.
"""
import logging
import platform
import re
import socket
import sys
from typing import Dict, Iterable, Iterator, Tuple

from linux_fingerprint.config import settings
from linux_fingerprint.models import PlatformInfo

logger = logging.getLogger(__name__)

QUOTE_CHARS = "\"'"

def read_trim(path: str, max_bytes: int = settings.MAX_READ_BYTES) -> str:
    """
    Return the whitespace-trimmed content of a file, or "" if it cannot be read.
    """
    try:
        with open(path, "rb") as f:
            data = f.read(max_bytes)
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)
        return ""

    return data.decode("utf-8", errors="replace").strip()

def _iter_lines(path: str) -> Iterator[str]:
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            for line in f:
                yield line.rstrip("\n")
    except OSError as e:
        logger.debug("Cannot read %s: %s", path, e)

def read_key_values(path: str, keys: Iterable[str]) -> Dict[str, str]:
    """
    Extract KEY=value pairs from a line-oriented file.

    Keys are matched by exact "KEY=" prefix and surrounding quotes are
    stripped from values. Keys that never appear map to "".
    """
    values = {key: "" for key in keys}
    for line in _iter_lines(path):
        for key in values:
            prefix = f"{key}="
            if line.startswith(prefix):
                values[key] = line[len(prefix):].strip().strip(QUOTE_CHARS)
                break
    return values

def os_release(path: str = settings.OS_RELEASE_PATH) -> Tuple[str, str]:
    """Return (NAME, VERSION) from an os-release file."""
    values = read_key_values(path, ("NAME", "VERSION"))
    return values["NAME"], values["VERSION"]

def scan_labeled_text(path: str, label: str) -> str:
    """
    Value after the first ':' on the first line starting with label.
    """
    for line in _iter_lines(path):
        if not line.startswith(label):
            continue
        _, sep, value = line.partition(":")
        if sep:
            return value.strip()
    return ""

def scan_labeled_int(path: str, label: str) -> int:
    """
    First integer token after label on the first matching line.

    Scanning stops at the first line carrying the label, even when its
    value does not parse.
    """
    for line in _iter_lines(path):
        if not line.startswith(label):
            continue
        tokens = line[len(label):].split()
        # Leading digits only, so "123kB" still reads as 123
        match = re.match(r"\d+", tokens[0]) if tokens else None
        if match is None:
            logger.debug("Non-numeric %s value in %s: %r", label, path, tokens[:1])
            return 0
        return int(match.group())
    return 0

def cpu_model(path: str = settings.CPUINFO_PATH) -> str:
    return scan_labeled_text(path, "model name")

def mem_total_kb(path: str = settings.MEMINFO_PATH) -> int:
    return scan_labeled_int(path, "MemTotal:")

def get_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as e:
        logger.debug("Cannot determine hostname: %s", e)
        return ""

def get_platform() -> PlatformInfo:
    """OS family and CPU architecture of the running interpreter."""
    return PlatformInfo(os=sys.platform, arch=platform.machine())
