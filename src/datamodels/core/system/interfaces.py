"""Network interface discovery shared by the platform implementations."""

import logging
import socket

import psutil

from datamodels.core.system.parsing import parse_hardware_address

logger = logging.getLogger(__name__)


def _is_loopback(name: str, flags: str) -> bool:
    if flags:
        return "loopback" in flags.split(",")
    return name.startswith("lo")


def first_hardware_address() -> bytes:
    """Return the hardware address of the first up, non-loopback interface.

    Interfaces are visited in interface-index order. Interfaces without a
    link-layer address (tunnels, for example) or with an all-zero address
    are skipped.

    Returns:
        6-byte hardware address

    Raises:
        OSError: If interfaces cannot be enumerated
        RuntimeError: If no suitable interface exists
    """
    addrs = psutil.net_if_addrs()
    stats = psutil.net_if_stats()

    for _index, name in sorted(socket.if_nameindex()):
        if_stats = stats.get(name)
        flags = getattr(if_stats, "flags", "") if if_stats is not None else ""
        if _is_loopback(name, flags):
            continue
        if if_stats is not None and not if_stats.isup:
            continue
        for addr in addrs.get(name, []):
            if addr.family != psutil.AF_LINK:
                continue
            address = parse_hardware_address(addr.address)
            if address is not None:
                logger.debug("Using hardware address of interface %s", name)
                return address

    raise RuntimeError("No non-loopback interface with a hardware address found")
