"""
Docker engine identity.

The engine keeps its ID in different places depending on how it was
installed (distribution package, rootless, snap, custom data-root), and
some setups expose it only through the API or the CLI. Sources are tried
in a fixed order and the first non-empty ID wins:

  1. engine-id under the data-root named in daemon.json
  2. engine-id under the standard, rootless and snap data roots
  3. legacy .docker_id / .docker_uuid markers
  4. GET /info on the local unix socket
  5. docker info -f {{.ID}}
"""
import json
import logging
import os
from typing import List, Optional

import httpx

from linux_fingerprint.commands import CommandRunner, run_command
from linux_fingerprint.config import Settings, settings
from linux_fingerprint.fallback import Step, first_resolved
from linux_fingerprint.probes import read_trim

logger = logging.getLogger(__name__)

ENGINE_ID_FILE = "engine-id"
LEGACY_ID_FILES = (".docker_id", ".docker_uuid")
# Host part is ignored when talking over a unix socket; only the path matters
INFO_URL = "http://docker/info"
CLI_ID_TEMPLATE = "{{.ID}}"

class DockerIdentityResolver:
    def __init__(
        self,
        config: Optional[Settings] = None,
        run: CommandRunner = run_command,
        transport: Optional[httpx.BaseTransport] = None,
        home: Optional[str] = None,
    ):
        self.config = config or settings
        self.run = run
        self.transport = transport
        self.home = os.environ.get("HOME", "") if home is None else home

    def configured_data_root(self) -> str:
        """
        data-root from the daemon configuration file, if one is set.
        """
        path = self.config.DOCKER_DAEMON_CONFIG
        try:
            with open(path, "r", encoding="utf-8") as f:
                daemon_config = json.load(f)
        except OSError as e:
            logger.debug("Cannot read %s: %s", path, e)
            return ""
        except ValueError as e:
            logger.debug("Ignoring malformed %s: %s", path, e)
            return ""

        if not isinstance(daemon_config, dict):
            return ""
        data_root = daemon_config.get("data-root")
        if not isinstance(data_root, str):
            return ""
        return data_root.strip()

    def data_root_candidates(self) -> List[str]:
        """
        Distinct data directories to search for engine-id, in priority order.
        """
        rootless = os.path.join(self.home, self.config.DOCKER_ROOTLESS_SUBDIR) if self.home else ""
        roots = [
            self.configured_data_root(),
            self.config.DOCKER_DATA_ROOT,
            rootless,
            self.config.DOCKER_SNAP_DATA_ROOT,
        ]

        candidates = []
        for root in roots:
            if root and root not in candidates:
                candidates.append(root)
        return candidates

    def from_engine_id(self) -> str:
        for root in self.data_root_candidates():
            engine_id = read_trim(os.path.join(root, ENGINE_ID_FILE), self.config.MAX_READ_BYTES)
            if engine_id:
                return engine_id
        return ""

    def from_legacy_files(self) -> str:
        for name in LEGACY_ID_FILES:
            engine_id = read_trim(os.path.join(self.config.DOCKER_DATA_ROOT, name), self.config.MAX_READ_BYTES)
            if engine_id:
                return engine_id
        return ""

    def from_socket(self) -> str:
        """
        Ask the daemon API over its unix socket.
        """
        transport = self.transport or httpx.HTTPTransport(uds=self.config.DOCKER_SOCKET_PATH)
        try:
            with httpx.Client(transport=transport, timeout=self.config.PROBE_TIMEOUT_SECONDS) as client:
                response = client.get(INFO_URL)
                if response.status_code != 200:
                    logger.debug("Docker API returned HTTP %s", response.status_code)
                    return ""
                info = response.json()
        except httpx.HTTPError as e:
            logger.debug("Docker API unreachable at %s: %s", self.config.DOCKER_SOCKET_PATH, e)
            return ""
        except ValueError as e:
            logger.debug("Docker API returned invalid JSON: %s", e)
            return ""

        if not isinstance(info, dict) or not isinstance(info.get("ID"), str):
            return ""
        return info["ID"].strip()

    def from_cli(self) -> str:
        return self.run(
            [self.config.DOCKER_BINARY, "info", "-f", CLI_ID_TEMPLATE],
            self.config.PROBE_TIMEOUT_SECONDS,
        )

    def steps(self) -> List[Step]:
        return [
            ("engine-id", self.from_engine_id),
            ("legacy marker files", self.from_legacy_files),
            ("docker socket", self.from_socket),
            ("docker cli", self.from_cli),
        ]

    def resolve(self) -> str:
        return first_resolved(self.steps(), what="docker daemon id")

def get_docker_daemon_id(config: Optional[Settings] = None) -> str:
    """
    Docker engine ID of this host, or "" if no source knows it.
    """
    return DockerIdentityResolver(config).resolve()
