import logging
from typing import List

import psutil

from linux_fingerprint.models import NetworkInterface

logger = logging.getLogger(__name__)

LOOPBACK_INTERFACE = "lo"
ZERO_MAC = "00:00:00:00:00:00"

def list_interfaces() -> List[NetworkInterface]:
    """
    Network interfaces with a usable hardware address, in OS enumeration order.

    The loopback interface and interfaces without a MAC (or with the
    all-zero MAC) are left out. Enumeration failures give an empty list.
    """
    try:
        addresses = psutil.net_if_addrs()
    except (OSError, psutil.Error) as e:
        logger.debug("Cannot enumerate network interfaces: %s", e)
        return []

    interfaces = []
    for name, entries in addresses.items():
        if name == LOOPBACK_INTERFACE:
            continue

        mac = next(
            (entry.address for entry in entries if entry.family == psutil.AF_LINK and entry.address),
            "",
        )
        if not mac or mac == ZERO_MAC:
            continue

        interfaces.append(NetworkInterface(name=name, mac=mac))

    return interfaces
