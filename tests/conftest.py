"""Shared fixtures for the mtuvalidator test suite."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock

import pytest

from mtuvalidator.platform._util import CommandResult
from mtuvalidator.validator import MtuValidator

# ── validators ────────────────────────────────────────────────────────


@pytest.fixture()
def ethernet_validator():
    return MtuValidator.for_ethernet()


@pytest.fixture()
def jumbo_validator():
    return MtuValidator.for_jumbo_frames()


@pytest.fixture()
def ipv6_validator():
    return MtuValidator.for_ipv6()


# ── platform command fakes ────────────────────────────────────────────


@pytest.fixture()
def fake_runner():
    """Factory fixture returning a MagicMock command runner.

    ``fake_runner(stdout=..., returncode=...)`` returns a canned CommandResult;
    ``fake_runner(side_effect=exc)`` raises instead.
    """

    def _make(stdout: str = "", returncode: int = 0, stderr: str = "", side_effect=None):
        runner = MagicMock()
        if side_effect is not None:
            runner.side_effect = side_effect
        else:
            runner.return_value = CommandResult(returncode=returncode, stdout=stdout, stderr=stderr)
        return runner

    return _make


@pytest.fixture()
def timeout_expired():
    return subprocess.TimeoutExpired(cmd="networksetup", timeout=10)


# ── sample outputs / configs ──────────────────────────────────────────

IFCONFIG_EN0 = """en0: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500
\toptions=6463<RXCSUM,TXCSUM,TSO4,TSO6,CHANNEL_IO,PARTIAL_CSUM,ZEROINVERT_CSUM>
\tether a4:83:e7:12:34:56
\tinet 192.168.1.23 netmask 0xffffff00 broadcast 192.168.1.255
\tstatus: active
"""

NETWORKSETUP_GETMTU = "Active MTU: 1500 (Current Setting: 1500)\n"

SERVICE_ORDER = """An asterisk (*) denotes that a network service is disabled.
(1) USB 10/100/1000 LAN
(Hardware Port: USB 10/100/1000 LAN, Device: en7)

(2) Wi-Fi
(Hardware Port: Wi-Fi, Device: en0)

(*) Thunderbolt Bridge
(Hardware Port: Thunderbolt Bridge, Device: bridge0)
"""


@pytest.fixture()
def ifconfig_output():
    return IFCONFIG_EN0


@pytest.fixture()
def networksetup_output():
    return NETWORKSETUP_GETMTU


@pytest.fixture()
def service_order_output():
    return SERVICE_ORDER
