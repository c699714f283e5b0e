import hashlib
import json
import logging
import os
from typing import Any, Dict, Optional

import httpx

from linux_fingerprint.commands import CommandRunner, run_command
from linux_fingerprint.config import Settings, settings
from linux_fingerprint.docker_identity import DockerIdentityResolver
from linux_fingerprint.models import CPUInfo, DMIInfo, DockerInfo, MemoryInfo, OSInfo, RootFSInfo, Snapshot
from linux_fingerprint.mounts import find_root_mount
from linux_fingerprint.network import list_interfaces
from linux_fingerprint.probes import cpu_model, get_hostname, get_platform, mem_total_kb, os_release, read_trim
from linux_fingerprint.rootfs_uuid import RootfsUUIDResolver

logger = logging.getLogger(__name__)

# Always emitted, even when empty
ALWAYS_EMITTED = ("platform",)

def get_snapshot(
    config: Optional[Settings] = None,
    run: CommandRunner = run_command,
    transport: Optional[httpx.BaseTransport] = None,
) -> Snapshot:
    """
    Collect every host fact once and return them as a single Snapshot.

    Probes never raise; a source that is missing leaves its field empty.
    The root mount is resolved first because the UUID lookup needs its
    device path.
    """
    config = config or settings

    def read(path: str) -> str:
        return read_trim(path, config.MAX_READ_BYTES)

    name, version = os_release(config.OS_RELEASE_PATH)
    source, fstype = find_root_mount(config.MOUNTINFO_PATH)

    snapshot = Snapshot(
        hostname=get_hostname(),
        os=OSInfo(
            name=name,
            version=version,
            kernel_type=read(config.KERNEL_OSTYPE_PATH),
            kernel_release=read(config.KERNEL_OSRELEASE_PATH),
        ),
        machine_id=read(config.MACHINE_ID_PATH),
        dmi=DMIInfo(
            product_uuid=read(os.path.join(config.DMI_DIR, "product_uuid")),
            board_serial=read(os.path.join(config.DMI_DIR, "board_serial")),
            chassis_asset_tag=read(os.path.join(config.DMI_DIR, "chassis_asset_tag")),
        ),
        cpu=CPUInfo(model=cpu_model(config.CPUINFO_PATH)),
        memory=MemoryInfo(mem_total_kb=mem_total_kb(config.MEMINFO_PATH)),
        network=tuple(list_interfaces()),
        rootfs=RootFSInfo(
            source=source,
            fstype=fstype,
            uuid=RootfsUUIDResolver(config, run=run).resolve(source),
        ),
        docker=DockerInfo(
            daemon_id=DockerIdentityResolver(config, run=run, transport=transport).resolve(),
        ),
        platform=get_platform(),
    )

    logger.debug("Collected snapshot for %s", snapshot.hostname or "unnamed host")
    return snapshot

def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        pruned = {key: _prune(item) for key, item in value.items()}
        return {key: item for key, item in pruned.items() if not _is_empty(item)}
    if isinstance(value, (list, tuple)):
        return [_prune(item) for item in value]
    return value

def _is_empty(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return value is None or value == "" or value == 0 or value == [] or value == {}

def snapshot_document(snapshot: Snapshot) -> Dict[str, Any]:
    """
    Snapshot as a plain dict with empty fields left out.
    """
    raw = snapshot.model_dump(mode="json")
    document = _prune({key: item for key, item in raw.items() if key not in ALWAYS_EMITTED})

    # Rebuild in field order so the output layout is stable
    return {
        key: raw[key] if key in ALWAYS_EMITTED else document[key]
        for key in raw
        if key in ALWAYS_EMITTED or key in document
    }

def serialize_snapshot(snapshot: Snapshot, indent: Optional[int] = 2) -> bytes:
    """
    UTF-8 JSON encoding of the snapshot, newline terminated.
    """
    document = snapshot_document(snapshot)
    if indent is None:
        text = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    else:
        text = json.dumps(document, indent=indent, ensure_ascii=False)
    return (text + "\n").encode("utf-8")

def get_hardware_fingerprint(snapshot: Optional[Snapshot] = None) -> str:
    """
    SHA-256 (hex) of the serialized snapshot.
    Collects a fresh snapshot when none is given.
    """
    if snapshot is None:
        snapshot = get_snapshot()
    return hashlib.sha256(serialize_snapshot(snapshot)).hexdigest()
