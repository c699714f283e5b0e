from collections import namedtuple

import psutil
import pytest

from linux_fingerprint.config import Settings

FakeAddress = namedtuple("FakeAddress", "family address netmask broadcast ptp")

def link_address(mac):
    return FakeAddress(psutil.AF_LINK, mac, None, None, None)

class FakeRunner:
    """Stands in for run_command; answers by binary name and records calls."""

    def __init__(self, outputs=None):
        self.outputs = outputs or {}
        self.calls = []

    def __call__(self, args, timeout):
        self.calls.append((list(args), timeout))
        return self.outputs.get(args[0], "")

@pytest.fixture
def runner():
    return FakeRunner()

@pytest.fixture
def config(tmp_path):
    """Settings whose every source points at a path that does not exist."""
    missing = tmp_path / "missing"
    return Settings(
        OS_RELEASE_PATH=str(missing / "os-release"),
        KERNEL_OSTYPE_PATH=str(missing / "ostype"),
        KERNEL_OSRELEASE_PATH=str(missing / "osrelease"),
        MACHINE_ID_PATH=str(missing / "machine-id"),
        DMI_DIR=str(missing / "dmi"),
        CPUINFO_PATH=str(missing / "cpuinfo"),
        MEMINFO_PATH=str(missing / "meminfo"),
        MOUNTINFO_PATH=str(missing / "mountinfo"),
        DISK_BY_UUID_DIR=str(missing / "by-uuid"),
        BLKID_BINARY="blkid",
        DOCKER_DAEMON_CONFIG=str(missing / "daemon.json"),
        DOCKER_DATA_ROOT=str(missing / "var-lib-docker"),
        DOCKER_SNAP_DATA_ROOT=str(missing / "snap-docker"),
        DOCKER_SOCKET_PATH=str(missing / "docker.sock"),
        DOCKER_BINARY="docker",
        PROBE_TIMEOUT_SECONDS=2.0,
    )

@pytest.fixture
def bare_host(monkeypatch):
    """No network interfaces and no home directory to search."""
    monkeypatch.setattr(psutil, "net_if_addrs", lambda: {})
    monkeypatch.setenv("HOME", "")
