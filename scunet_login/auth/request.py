"""Form POST helper for the eportal InterFace.do endpoints."""

import requests

from ..config import BASE_URL, REQUEST_TIMEOUT
from ..errors import GatewayResponseError, GatewayUnreachable
from ..logging_setup import log


def post_form(session: requests.Session, path: str, data: dict) -> dict:
    """
    POST *data* url-encoded to BASE_URL + *path* and return the decoded
    JSON object.

    Raises GatewayUnreachable on transport or HTTP errors and
    GatewayResponseError when the body is not a JSON object.
    """
    url = BASE_URL + path
    try:
        resp = session.post(url, data=data, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as exc:
        log.error("POST %s failed: %s", path, exc)
        raise GatewayUnreachable(str(exc)) from exc

    try:
        body = resp.json()
    except ValueError as exc:
        raise GatewayResponseError(f"{path} returned non-JSON: {resp.text[:120]!r}") from exc
    if not isinstance(body, dict):
        raise GatewayResponseError(f"{path} returned {type(body).__name__}, expected an object")
    return body
