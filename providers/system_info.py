"""Host operating system information."""

from __future__ import annotations

import os
import platform
import socket
import sys
import time

import psutil

from core.results import SystemInfo

GIGABYTE = 1024**3


def format_memory(total_bytes: int) -> str:
    """Human readable memory size with a GB suffix."""
    return f"{total_bytes / GIGABYTE:.2f} GB"


def inspect_system() -> SystemInfo:
    """Return a snapshot of the host system."""
    return SystemInfo(
        type=platform.system(),
        architecture=platform.machine(),
        hostname=socket.gethostname(),
        platform=sys.platform,
        cpus=os.cpu_count() or 0,
        memory=format_memory(psutil.virtual_memory().total),
        uptime=int(time.time() - psutil.boot_time()),
    )
