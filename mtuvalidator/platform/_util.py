"""Subprocess runner and name validation for platform extractors."""

from __future__ import annotations

import re
import subprocess
from dataclasses import dataclass
from typing import Callable

from loguru import logger

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of a finished child process."""

    returncode: int
    stdout: str = ""
    stderr: str = ""


CommandRunner = Callable[[list[str], float], CommandResult]


def run_command(cmd: list[str], timeout: float = DEFAULT_TIMEOUT) -> CommandResult:
    """Run ``cmd`` and capture its output.

    Undecodable output bytes are replaced, not fatal. The child is killed
    and reaped if it outlives ``timeout``; the
    ``subprocess.TimeoutExpired`` is then re-raised to the caller.

    Raises:
        subprocess.TimeoutExpired: The command did not finish in time.
        OSError: The executable could not be started.
    """
    logger.debug(f"Running {' '.join(cmd)} (timeout {timeout}s)")
    with subprocess.Popen(
        cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, errors="replace"
    ) as proc:
        try:
            stdout, stderr = proc.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.communicate()
            logger.debug(f"Command {cmd[0]} killed after {timeout}s")
            raise
    return CommandResult(returncode=proc.returncode, stdout=stdout or "", stderr=stderr or "")


def _validate_interface_name(name: str) -> bool:
    """Validate interface name to prevent injection."""
    return bool(re.match(r"^[a-zA-Z0-9._-]+$", name))


def _validate_service_name(name: str) -> bool:
    """Validate a network service name ("Wi-Fi", "USB 10/100/1000 LAN")."""
    return bool(name.strip()) and not any(ord(c) < 32 or ord(c) == 127 for c in name)
