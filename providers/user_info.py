"""Identity of the user running the process."""

from __future__ import annotations

import getpass
import logging
import os
import sys
from pathlib import Path

from core.results import UserInfo

if sys.platform != "win32":
    import pwd

logger = logging.getLogger("sysinfo.providers.user")


def inspect_user() -> UserInfo:
    """Return uid, gid, username, home directory and login shell.

    ``uid``/``gid`` are -1 and ``shell`` is omitted on platforms without them.
    """
    uid = os.getuid() if hasattr(os, "getuid") else -1
    gid = os.getgid() if hasattr(os, "getgid") else -1
    shell = None
    if uid >= 0 and sys.platform != "win32":
        try:
            shell = pwd.getpwuid(uid).pw_shell or None
        except KeyError:
            logger.warning("No passwd entry for uid %d", uid)
    return UserInfo(
        uid=uid,
        gid=gid,
        username=getpass.getuser(),
        homedir=str(Path.home()),
        shell=shell,
    )
