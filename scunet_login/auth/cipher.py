"""Password encryption for the eportal login form."""

import string
import urllib.parse

import requests

from ..config import ENCRYPTED_CREDENTIAL_LENGTH, PAGE_INFO_URL
from ..errors import GatewayResponseError
from ..logging_setup import log
from ..types import PublicKey
from .request import post_form

_HEX_DIGITS = frozenset(string.hexdigits)


def is_encrypted(credential: str) -> bool:
    """True when *credential* already looks like a previous run's output."""
    return (
        len(credential) == ENCRYPTED_CREDENTIAL_LENGTH
        and all(c in _HEX_DIGITS for c in credential)
    )


def extract_mac(query_string: str) -> str:
    """Return the ``mac`` parameter embedded in the continuation token."""
    params = dict(urllib.parse.parse_qsl(query_string, keep_blank_values=True))
    mac = params.get("mac")
    if not mac:
        raise GatewayResponseError("continuation token carries no mac parameter")
    return mac


def fetch_public_key(session: requests.Session, query_string: str) -> PublicKey:
    """
    POST the token to pageInfo and return the RSA key the gateway expects
    for this session.  The key rotates, so never cache it across tokens.
    """
    info = post_form(session, PAGE_INFO_URL, {"queryString": query_string})
    try:
        key = PublicKey.from_hex(info["publicKeyModulus"], info["publicKeyExponent"])
    except (KeyError, TypeError, ValueError) as exc:
        raise GatewayResponseError(f"pageInfo returned no usable public key: {info!r}") from exc

    log.debug("Public key: %d-bit modulus, exponent %#x", key.modulus.bit_length(), key.exponent)
    return key


def rsa_encrypt(message: str, key: PublicKey) -> str:
    """
    Textbook RSA: the UTF-8 bytes of *message* are read as one big-endian
    integer and raised to the public exponent.  No padding; the result is
    lowercase hex without leading zeros.

    >>> rsa_encrypt("A", PublicKey(modulus=3233, exponent=17))
    'ae6'
    """
    m = int.from_bytes(message.encode("utf-8"), "big")
    return format(pow(m, key.exponent, key.modulus), "x")


def encrypt_password(session: requests.Session, password: str, query_string: str) -> str:
    """
    Return the credential to submit for *password*.

    A credential that is already encrypted is returned unchanged without
    touching the network.  Otherwise ``"<password>><mac>"`` is encrypted
    with a key fetched for *query_string*.
    """
    if is_encrypted(password):
        log.debug("Credential is already encrypted, reusing it")
        return password

    mac = extract_mac(query_string)
    key = fetch_public_key(session, query_string)
    return rsa_encrypt(f"{password}>{mac}", key)
