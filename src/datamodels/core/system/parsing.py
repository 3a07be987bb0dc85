"""Parsers for OS query output.

Pure functions over text so they can be tested without the real files or
tools being present.
"""

import re

from datamodels.core.system.abc import MemoryStats

# Counters summed into "free": reclaimable memory the kernel hands back on demand
_RECLAIMABLE_KEYS = ("Buffers", "Cached", "SReclaimable")

_IOREG_SERIAL_RE = re.compile(r'"IOPlatformSerialNumber"\s*=\s*"([^"]*)"')


def parse_proc_uptime(text: str) -> int:
    """Parse /proc/uptime content into whole seconds since boot.

    Args:
        text: File content, e.g. "35212.47 140213.83"

    Returns:
        Seconds since boot, truncated

    Raises:
        ValueError: If the first field is missing or not a number
    """
    fields = text.split()
    if not fields:
        raise ValueError("uptime source is empty")
    return int(float(fields[0]))


def parse_meminfo(text: str) -> MemoryStats:
    """Parse /proc/meminfo content into memory counters.

    Free memory is MemFree plus buffers, page cache, and reclaimable slab.
    Used memory is the remainder of MemTotal.

    Args:
        text: File content with "Key:   value kB" lines

    Returns:
        MemoryStats in kilobytes

    Raises:
        ValueError: If MemTotal or MemFree is missing or zero
    """
    counters: dict[str, int] = {}
    for line in text.splitlines():
        key, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts or not parts[0].isdigit():
            continue
        counters[key.strip()] = int(parts[0])

    total = counters.get("MemTotal", 0)
    mem_free = counters.get("MemFree", 0)
    if total == 0 or mem_free == 0:
        raise ValueError("meminfo is missing MemTotal or MemFree")

    free = mem_free + sum(counters.get(key, 0) for key in _RECLAIMABLE_KEYS)
    # Clamp at zero when reclaimable counters exceed MemTotal
    used = max(total - free, 0)
    return MemoryStats(total=total, free=free, used=used)


def parse_ioreg_serial(text: str) -> str:
    """Extract IOPlatformSerialNumber from `ioreg -rd1 -c IOPlatformExpertDevice` output.

    Raises:
        RuntimeError: If the serial number property is absent or empty
    """
    match = _IOREG_SERIAL_RE.search(text)
    if match is None or not match.group(1):
        raise RuntimeError("IOPlatformSerialNumber not found in ioreg output")
    return match.group(1)


def parse_hardware_address(text: str) -> bytes | None:
    """Parse a textual MAC address ("aa:bb:cc:dd:ee:ff" or "aa-bb-...") into 6 bytes.

    Returns None for addresses that are not 6 octets or are all zeros.
    """
    octets = text.replace("-", ":").split(":")
    if len(octets) != 6:
        return None
    try:
        address = bytes(int(octet, 16) for octet in octets)
    except ValueError:
        return None
    if not any(address):
        return None
    return address
