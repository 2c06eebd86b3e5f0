"""
scunet_login
============
Python package for logging in to the SCUNET captive portal (the eportal
gateway at 192.168.2.135) from scripts, boot tasks or a GUI.

Package structure
-----------------
scunet_login/
├── __init__.py        – package init and public API
├── config.py          – gateway address, endpoints, timeouts, retry bounds
├── errors.py          – LoginError hierarchy
├── types.py           – Service, session status and outcome dataclasses
├── logging_setup.py   – "scunet-login" logger (colorlog when installed)
├── cli.py             – argparse CLI (``python -m scunet_login``)
├── network/           – requests.Session factory, WLAN presence check
└── auth/              – probe, RSA password encryption, login flow
    ├── probe.py       – logged-in check and queryString extraction
    ├── cipher.py      – pageInfo key fetch and textbook RSA
    ├── request.py     – InterFace.do form POST helper
    ├── submit.py      – login form POST
    ├── info.py        – getOnlineUserInfo polling
    └── flow.py        – login() orchestration and background runner

Quick start
-----------
    from scunet_login import login, Service, Success

    outcome = login("2022141460000", "your_password", Service.CHINA_MOBILE)
    if isinstance(outcome, Success):
        print(outcome.display_name, outcome.remaining_hours)
"""

from .auth import login, login_in_background
from .errors import (
    GatewayRejected,
    GatewayResponseError,
    GatewayUnreachable,
    InfoUnavailable,
    LoginError,
    NetworkGateFailed,
    NotOnExpectedNetwork,
    TimedOut,
)
from .types import AlreadyAuthenticated, LoginOutcome, Service, Success

__all__ = [
    "login",
    "login_in_background",
    "Service",
    "Success",
    "AlreadyAuthenticated",
    "LoginOutcome",
    "LoginError",
    "TimedOut",
    "GatewayRejected",
    "InfoUnavailable",
    "NetworkGateFailed",
    "NotOnExpectedNetwork",
    "GatewayUnreachable",
    "GatewayResponseError",
]
