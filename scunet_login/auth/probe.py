"""Status probe: is this machine already logged in to the gateway?"""

import urllib.parse

import requests

from ..config import BASE_URL, REQUEST_TIMEOUT, TOKEN_HEAD_OFFSET, TOKEN_TAIL_OFFSET
from ..errors import GatewayResponseError, GatewayUnreachable, TimedOut
from ..logging_setup import log
from ..types import Authenticated, SessionStatus, Unauthenticated


def extract_token(body: bytes) -> str:
    """
    Cut the continuation token (queryString) out of the raw bytes of the
    unauthenticated root page.

    The page is a fixed-format script redirect, so the token is simply
    ``body[71:len(body) - 12]``, counted in bytes.  The offsets are tied to
    the gateway's page layout; recheck them against a live gateway before
    changing them.
    """
    token = body[TOKEN_HEAD_OFFSET:len(body) - TOKEN_TAIL_OFFSET]
    if not token:
        raise GatewayResponseError(
            f"unexpected gateway page ({len(body)} bytes): {body[:120]!r}"
        )
    try:
        return token.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise GatewayResponseError(
            f"continuation token is not UTF-8: {token[:120]!r}"
        ) from exc


def session_handle(url: str) -> str | None:
    """
    Return the userIndex carried by a post-login URL, or None.

    A logged-in client is redirected to /eportal/success.jsp?userIndex=...;
    the handle is everything after the first '='.
    """
    query = urllib.parse.urlsplit(url).query
    if not query:
        return None
    return query.partition("=")[2]


def probe(session: requests.Session) -> SessionStatus:
    """
    GET the gateway root (following redirects) and classify the result.

    Returns Authenticated(handle) when the final URL carries a query string,
    otherwise Unauthenticated(token) with the token cut from the body.
    Raises TimedOut on a 5xx.
    """
    try:
        resp = session.get(BASE_URL, timeout=REQUEST_TIMEOUT, allow_redirects=True)
    except requests.RequestException as exc:
        log.error("Gateway probe failed: %s", exc)
        raise GatewayUnreachable(str(exc)) from exc

    if resp.status_code >= 500:
        log.error("Gateway answered HTTP %s to the status probe", resp.status_code)
        raise TimedOut(resp.status_code)

    handle = session_handle(resp.url)
    if handle is not None:
        log.debug("Probe: authenticated, userIndex=%s", handle)
        return Authenticated(handle)

    token = extract_token(resp.content)
    log.debug("Probe: not authenticated, queryString=%s", token)
    return Unauthenticated(token)
