"""Value types passed between the login steps."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Service(Enum):
    """Egress the login binds to.  Values are the ``service`` form field."""

    INTERNET      = "internet"
    CHINA_MOBILE  = "%E7%A7%BB%E5%8A%A8%E5%87%BA%E5%8F%A3"
    CHINA_TELECOM = "%E7%94%B5%E4%BF%A1%E5%87%BA%E5%8F%A3"
    CHINA_UNICOM  = "%E8%81%94%E9%80%9A%E5%87%BA%E5%8F%A3"

    @property
    def param(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _SERVICE_LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "Service":
        """Accept a member name (``china_mobile``), a form value
        (``internet``) or a display label (``中国移动``)."""
        key = text.strip()
        for service in cls:
            if key.upper() == service.name or key == service.value or key == service.label:
                return service
        raise ValueError(f"unknown service: {text!r}")


_SERVICE_LABELS = {
    Service.INTERNET:      "校园网",
    Service.CHINA_MOBILE:  "中国移动",
    Service.CHINA_TELECOM: "中国电信",
    Service.CHINA_UNICOM:  "中国联通",
}


@dataclass(frozen=True)
class Authenticated:
    session_handle: str


@dataclass(frozen=True)
class Unauthenticated:
    continuation_token: str


SessionStatus = Union[Authenticated, Unauthenticated]


@dataclass(frozen=True)
class PublicKey:
    """RSA public key handed out by pageInfo, valid for one token."""

    modulus: int
    exponent: int

    @classmethod
    def from_hex(cls, modulus: str, exponent: str) -> "PublicKey":
        return cls(int(modulus, 16), int(exponent, 16))


@dataclass(frozen=True)
class LoginFormResult:
    result: str
    message: str


@dataclass(frozen=True)
class SessionInfo:
    user_name: str
    welcome_tip: str
    remaining_hours: Optional[float] = None


@dataclass(frozen=True)
class Success:
    """Login confirmed by a second probe."""

    display_name: str
    greeting: str
    remaining_hours: Optional[float]
    session_handle: str
    encrypted_credential: str
    service: Service


@dataclass(frozen=True)
class AlreadyAuthenticated:
    pass


LoginOutcome = Union[Success, AlreadyAuthenticated]
