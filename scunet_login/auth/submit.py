"""Submit the eportal login form."""

import requests

from ..config import LOGIN_URL
from ..logging_setup import log
from ..types import LoginFormResult, Service
from .request import post_form


def submit(
    session: requests.Session,
    identity: str,
    credential: str,
    service: Service,
    query_string: str,
) -> LoginFormResult:
    """
    POST userId / password / service / queryString / passwordEncrypt.

    The gateway's ``result`` is not authoritative; the caller confirms with
    a fresh probe and only uses ``message`` to explain a failure.
    """
    payload = {
        "userId": identity,
        "password": credential,
        "service": service.param,
        "queryString": query_string,
        "passwordEncrypt": "true",
    }
    body = post_form(session, LOGIN_URL, payload)
    result = LoginFormResult(
        result=str(body.get("result", "")),
        message=str(body.get("message") or ""),
    )
    log.debug("Login form: result=%r message=%r", result.result, result.message)
    return result
