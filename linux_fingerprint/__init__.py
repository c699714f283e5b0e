"""
Linux host fingerprinting

Collects kernel/OS release, DMI identifiers, CPU model, memory size, network
MAC addresses, root filesystem device and UUID, and the Docker engine ID into
one immutable snapshot, which can be printed as JSON or reduced to a SHA-256
fingerprint for licensing and deduplication.
"""

__version__ = "1.0.0"
