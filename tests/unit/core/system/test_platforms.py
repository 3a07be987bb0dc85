"""Tests for the Linux and macOS SystemInfo implementations."""

import subprocess
import sys
import time
from pathlib import Path
from types import SimpleNamespace

import psutil
import pytest

from datamodels.core.system import create_system_info
from datamodels.core.system.abc import MemoryStats
from datamodels.core.system.darwin import DarwinSystemInfo
from datamodels.core.system.linux import LinuxSystemInfo


@pytest.fixture
def proc_root(tmp_path: Path) -> Path:
    (tmp_path / "uptime").write_text("35212.47 140213.83\n", encoding="utf-8")
    (tmp_path / "meminfo").write_text(
        "MemTotal: 16384000 kB\nMemFree: 8000000 kB\nBuffers: 100000 kB\n"
        "Cached: 90000 kB\nSReclaimable: 2000 kB\n",
        encoding="utf-8",
    )
    return tmp_path


def test_linux_reads_procfs(proc_root: Path) -> None:
    system = LinuxSystemInfo(proc_root=proc_root)

    assert system.uptime_seconds() == 35212
    assert system.memory_stats() == MemoryStats(total=16384000, free=8192000, used=8192000)


def test_linux_missing_procfs_raises_os_error(tmp_path: Path) -> None:
    system = LinuxSystemInfo(proc_root=tmp_path)

    with pytest.raises(OSError):
        system.uptime_seconds()
    with pytest.raises(OSError):
        system.memory_stats()


def test_linux_serial_is_uppercase_hardware_address(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "datamodels.core.system.linux.first_hardware_address",
        lambda: bytes.fromhex("a4831e0b5c7f"),
    )
    system = LinuxSystemInfo()

    assert system.serial_number() == "A4831E0B5C7F"
    assert system.hardware_address() == bytes.fromhex("a4831e0b5c7f")


def test_darwin_serial_from_ioreg(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[list[str]] = []

    def fake_run(cmd, operation_context, **kwargs):
        calls.append(list(cmd))
        return subprocess.CompletedProcess(
            cmd, 0, stdout='    "IOPlatformSerialNumber" = "C02XK0AAJGH5"\n', stderr=""
        )

    monkeypatch.setattr("datamodels.core.system.darwin.run_subprocess_with_context", fake_run)

    assert DarwinSystemInfo().serial_number() == "C02XK0AAJGH5"
    assert calls == [["ioreg", "-rd1", "-c", "IOPlatformExpertDevice"]]


def test_darwin_memory_from_vm_statistics(monkeypatch: pytest.MonkeyPatch) -> None:
    vm = SimpleNamespace(
        total=16 * 1024**3,
        free=1 * 1024**3,
        inactive=3 * 1024**3,
        active=8 * 1024**3,
        wired=2 * 1024**3,
    )
    monkeypatch.setattr(psutil, "virtual_memory", lambda: vm)

    stats = DarwinSystemInfo().memory_stats()

    assert stats == MemoryStats(total=16 * 1024**2, free=4 * 1024**2, used=10 * 1024**2)


def test_darwin_uptime_from_boot_time(monkeypatch: pytest.MonkeyPatch) -> None:
    booted = time.time() - 35212.4
    monkeypatch.setattr(psutil, "boot_time", lambda: booted)

    assert DarwinSystemInfo().uptime_seconds() == 35212


def test_create_system_info_selects_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(sys, "platform", "darwin")
    assert isinstance(create_system_info(), DarwinSystemInfo)

    monkeypatch.setattr(sys, "platform", "linux")
    assert isinstance(create_system_info(), LinuxSystemInfo)
