from pydantic import BaseModel, ConfigDict, Field
from typing import Tuple

class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)

class OSInfo(FrozenModel):
    name: str = ""
    version: str = ""
    kernel_type: str = ""
    kernel_release: str = ""

class DMIInfo(FrozenModel):
    product_uuid: str = ""
    board_serial: str = ""
    chassis_asset_tag: str = ""

class CPUInfo(FrozenModel):
    model: str = ""

class MemoryInfo(FrozenModel):
    mem_total_kb: int = 0

class NetworkInterface(FrozenModel):
    name: str
    mac: str

class RootFSInfo(FrozenModel):
    source: str = ""
    fstype: str = ""
    uuid: str = ""

class DockerInfo(FrozenModel):
    daemon_id: str = ""

class PlatformInfo(FrozenModel):
    os: str
    arch: str

class Snapshot(FrozenModel):
    """
    Everything collected about the host in one pass.
    """
    hostname: str = ""
    os: OSInfo = Field(default_factory=OSInfo)
    machine_id: str = ""
    dmi: DMIInfo = Field(default_factory=DMIInfo)
    cpu: CPUInfo = Field(default_factory=CPUInfo)
    memory: MemoryInfo = Field(default_factory=MemoryInfo)
    network: Tuple[NetworkInterface, ...] = ()
    rootfs: RootFSInfo = Field(default_factory=RootFSInfo)
    docker: DockerInfo = Field(default_factory=DockerInfo)
    platform: PlatformInfo
