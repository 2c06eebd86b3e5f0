"""Check that the device is associated with SCUNET before probing."""

import shutil
import subprocess
import sys
import time
from typing import Callable, Optional

from ..config import EXPECTED_SSID, PRESENCE_BOOT_ATTEMPTS, PRESENCE_RETRY_DELAY
from ..errors import LoginError, NetworkGateFailed, NotOnExpectedNetwork
from ..logging_setup import log


def _run(cmd: list[str]) -> Optional[str]:
    if shutil.which(cmd[0]) is None:
        log.debug("%s not available, skipping SSID check", cmd[0])
        return None
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
    except subprocess.TimeoutExpired as exc:
        raise NetworkGateFailed(f"{cmd[0]} did not answer", -1) from exc
    if proc.returncode != 0:
        raise NetworkGateFailed(proc.stderr.strip() or proc.stdout.strip(), proc.returncode)
    return proc.stdout


def current_ssid() -> Optional[str]:
    """
    Return the SSID of the active WLAN connection.

    Returns None whenever the answer cannot count against the device: the
    platform tool is missing, or NetworkManager reports no active WLAN
    (wired-only hosts, radio off).  Windows returns "" when the WLAN
    interface is not associated.
    """
    if sys.platform == "win32":
        out = _run(["netsh", "wlan", "show", "interfaces"])
        if out is None:
            return None
        for line in out.splitlines():
            key, sep, value = line.partition(":")
            if sep and key.strip() == "SSID":
                return value.strip()
        return ""

    out = _run(["nmcli", "-t", "-f", "ACTIVE,SSID", "dev", "wifi"])
    if out is None:
        return None
    for line in out.splitlines():
        active, _, ssid = line.partition(":")
        if active == "yes":
            return ssid.replace("\\:", ":")
    return None


def check_network(
    startup_context: bool = False,
    ssid_reader: Callable[[], Optional[str]] = current_ssid,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """
    Raise unless the device is on EXPECTED_SSID.

    At boot the WLAN may still be associating, so up to
    PRESENCE_BOOT_ATTEMPTS checks are made one PRESENCE_RETRY_DELAY apart;
    otherwise a single check decides.  The last failure is raised.
    """
    max_attempts = PRESENCE_BOOT_ATTEMPTS if startup_context else 1
    last_error: LoginError | None = None

    for attempt in range(1, max_attempts + 1):
        try:
            ssid = ssid_reader()
        except NetworkGateFailed as exc:
            last_error = exc
        else:
            if ssid is None or ssid == EXPECTED_SSID:
                log.debug("Network check passed (ssid=%r)", ssid)
                return
            last_error = NotOnExpectedNetwork(ssid)

        log.debug("Network check %d/%d failed: %s", attempt, max_attempts, last_error)
        if attempt < max_attempts:
            sleep(PRESENCE_RETRY_DELAY)

    raise last_error
