"""Login orchestration: probe, encrypt, submit, confirm, fetch info."""

import queue
import threading
import time
from typing import Callable, Optional

import requests

from ..config import BOOT_SETTLE_DELAY, FALLBACK_SIGNATURE
from ..errors import GatewayRejected
from ..logging_setup import log
from ..network.client import build_session
from ..network.presence import check_network
from ..types import AlreadyAuthenticated, Authenticated, LoginOutcome, Service, Success
from .cipher import encrypt_password
from .info import fetch_session_info
from .probe import probe
from .submit import submit

MAX_FALLBACKS = 1


def _should_fall_back(exc: GatewayRejected, service: Service) -> bool:
    return service is not Service.INTERNET and FALLBACK_SIGNATURE in exc.message.lower()


def _attempt(
    session: requests.Session,
    identity: str,
    credential: str,
    service: Service,
    startup_context: bool,
    settle: bool,
    presence_check: Callable[[bool], None],
    sleep: Callable[[float], None],
) -> LoginOutcome:
    presence_check(startup_context)

    if settle:
        log.debug("Started at boot, waiting %.1fs for the interface", BOOT_SETTLE_DELAY)
        sleep(BOOT_SETTLE_DELAY)

    status = probe(session)
    if isinstance(status, Authenticated):
        log.info("Already logged in to SCUNET")
        return AlreadyAuthenticated()

    query_string = status.continuation_token
    encrypted = encrypt_password(session, credential, query_string)

    log.info("Logging in as %s via %s", identity, service.label)
    form = submit(session, identity, encrypted, service, query_string)

    # The form response is not authoritative: ask the gateway again.
    confirmed = probe(session)
    if not isinstance(confirmed, Authenticated):
        log.error("Login not confirmed: %s", form.message or form.result)
        raise GatewayRejected(form.message)

    info = fetch_session_info(session, confirmed.session_handle, sleep=sleep)
    log.info("Login successful (%s), userIndex=%s", service.label, confirmed.session_handle)
    return Success(
        display_name=info.user_name,
        greeting=info.welcome_tip,
        remaining_hours=info.remaining_hours,
        session_handle=confirmed.session_handle,
        encrypted_credential=encrypted,
        service=service,
    )


def login(
    identity: str,
    credential: str,
    service: Service = Service.INTERNET,
    startup_context: bool = False,
    session: Optional[requests.Session] = None,
    presence_check: Callable[[bool], None] = check_network,
    sleep: Callable[[float], None] = time.sleep,
) -> LoginOutcome:
    """
    Log in to SCUNET unless this machine already is.

    *credential* is the plaintext password or the 256-hex encrypted form
    returned in ``Success.encrypted_credential`` by an earlier run.

    When *startup_context* is set (launched at boot) the presence check
    retries and a settling delay precedes the first probe.

    If a carrier egress rejects the terminal ("terminal failed"), the whole
    flow is retried once on Service.INTERNET.  Any other failure, or a
    second rejection, is raised as a LoginError.
    """
    if session is None:
        session = build_session()

    fallbacks = 0
    settle = startup_context
    while True:
        try:
            return _attempt(
                session, identity, credential, service,
                startup_context, settle, presence_check, sleep,
            )
        except GatewayRejected as exc:
            if fallbacks >= MAX_FALLBACKS or not _should_fall_back(exc, service):
                raise
            log.warning(
                "%s rejected the terminal (%s), retrying via %s",
                service.label, exc.message, Service.INTERNET.label,
            )
            service = Service.INTERNET
            fallbacks += 1
            settle = False


def login_in_background(
    identity: str,
    credential: str,
    service: Service = Service.INTERNET,
    startup_context: bool = False,
    **kwargs,
) -> "queue.Queue":
    """
    Run login() on a daemon thread and return a one-shot queue.

    Exactly one item is put on the queue: the LoginOutcome, or the
    exception login() raised.  The caller must not start a second attempt
    before reading it.
    """
    channel: queue.Queue = queue.Queue(maxsize=1)

    def _worker() -> None:
        try:
            outcome = login(identity, credential, service, startup_context, **kwargs)
        except Exception as exc:
            channel.put(exc)
        else:
            channel.put(outcome)

    threading.Thread(target=_worker, name="scunet-login", daemon=True).start()
    return channel
