"""Exceptions raised by a login attempt.

Every failure ends the current attempt.  ``login()`` only catches a
:class:`GatewayRejected` whose message allows a fallback to the campus
egress.
"""


class LoginError(Exception):
    """Base class for all login failures."""


class TimedOut(LoginError):
    """The gateway root answered with a server error."""

    def __init__(self, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__("connection to the gateway timed out")


class GatewayRejected(LoginError):
    """The login form was not accepted; carries the gateway's message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InfoUnavailable(LoginError):
    """getOnlineUserInfo never reported success.  The login itself may
    still have gone through on the gateway side."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__("could not fetch online user info (the login may still have succeeded)")


class NetworkGateFailed(LoginError):
    """The platform could not report the current WLAN connection."""

    def __init__(self, reason: str, code: int) -> None:
        self.reason = reason
        self.code = code
        super().__init__(f"error {code}: {reason}")


class NotOnExpectedNetwork(LoginError):
    """The device is associated with some other network."""

    def __init__(self, ssid: str | None = None) -> None:
        self.ssid = ssid
        super().__init__("not connected to SCUNET")


class GatewayUnreachable(LoginError):
    """Transport-level failure talking to the gateway."""


class GatewayResponseError(LoginError):
    """The gateway answered with something we cannot parse."""
