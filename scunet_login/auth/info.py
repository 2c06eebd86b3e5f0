"""Fetch the online-user info shown after a successful login."""

import json
import math
import time
from typing import Callable, Optional

import requests

from ..config import INFO_MAX_ATTEMPTS, INFO_RETRY_DELAY, USER_INFO_URL
from ..errors import InfoUnavailable
from ..logging_setup import log
from ..types import SessionInfo
from .request import post_form


def remaining_hours(ball_info: Optional[str]) -> Optional[float]:
    """
    Parse the quota out of ``ballInfo``.

    ballInfo is a JSON array serialised into a string.  Entry 1 holds the
    remaining seconds as a string; only campus-network accounts without a
    package have it.  Anything missing or non-numeric gives None.
    """
    if not ball_info:
        return None
    try:
        balls = json.loads(ball_info)
        seconds = float(balls[1]["value"])
        # tenths of an hour, ties rounded up
        return math.floor(seconds / 3600 * 10 + 0.5) / 10
    except (ValueError, TypeError, KeyError, IndexError, OverflowError):
        return None


def fetch_session_info(
    session: requests.Session,
    user_index: str,
    sleep: Callable[[float], None] = time.sleep,
) -> SessionInfo:
    """
    POST userIndex to getOnlineUserInfo until it reports success.

    Right after login the gateway may not know the session yet, so up to
    INFO_MAX_ATTEMPTS requests are made INFO_RETRY_DELAY apart.
    """
    for attempt in range(1, INFO_MAX_ATTEMPTS + 1):
        body = post_form(session, USER_INFO_URL, {"userIndex": user_index})
        if body.get("result") == "success":
            return SessionInfo(
                user_name=str(body.get("userName") or ""),
                welcome_tip=str(body.get("welcomeTip") or ""),
                remaining_hours=remaining_hours(body.get("ballInfo")),
            )

        log.debug(
            "Online user info not ready (attempt %d/%d): %r",
            attempt, INFO_MAX_ATTEMPTS, body.get("message"),
        )
        if attempt < INFO_MAX_ATTEMPTS:
            sleep(INFO_RETRY_DELAY)

    log.warning("Gave up on online user info after %d attempts", INFO_MAX_ATTEMPTS)
    raise InfoUnavailable(INFO_MAX_ATTEMPTS)
