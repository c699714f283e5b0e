from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # OS / kernel sources
    OS_RELEASE_PATH: str = "/etc/os-release"
    KERNEL_OSTYPE_PATH: str = "/proc/sys/kernel/ostype"
    KERNEL_OSRELEASE_PATH: str = "/proc/sys/kernel/osrelease"
    MACHINE_ID_PATH: str = "/etc/machine-id"

    # Hardware sources
    DMI_DIR: str = "/sys/class/dmi/id"
    CPUINFO_PATH: str = "/proc/cpuinfo"
    MEMINFO_PATH: str = "/proc/meminfo"

    # Root filesystem
    MOUNTINFO_PATH: str = "/proc/self/mountinfo"
    DISK_BY_UUID_DIR: str = "/dev/disk/by-uuid"
    BLKID_BINARY: str = "blkid"

    # Docker engine identity
    DOCKER_DAEMON_CONFIG: str = "/etc/docker/daemon.json"
    DOCKER_DATA_ROOT: str = "/var/lib/docker"
    DOCKER_SNAP_DATA_ROOT: str = "/var/snap/docker/common/var-lib-docker"
    DOCKER_ROOTLESS_SUBDIR: str = ".local/share/docker"
    DOCKER_SOCKET_PATH: str = "/var/run/docker.sock"
    DOCKER_BINARY: str = "docker"

    # Limits
    PROBE_TIMEOUT_SECONDS: float = 2.0
    MAX_READ_BYTES: int = 64 * 1024

    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="FINGERPRINT_", extra="ignore")

settings = Settings()
