"""Authentication submodule: probe, password encryption, login flow."""

from scunet_login.auth.cipher import (
    encrypt_password,
    extract_mac,
    fetch_public_key,
    is_encrypted,
    rsa_encrypt,
)
from scunet_login.auth.info import fetch_session_info, remaining_hours
from scunet_login.auth.flow import login, login_in_background
from scunet_login.auth.probe import extract_token, probe, session_handle
from scunet_login.auth.submit import submit

__all__ = [
    "encrypt_password",
    "extract_mac",
    "fetch_public_key",
    "is_encrypted",
    "rsa_encrypt",
    "fetch_session_info",
    "remaining_hours",
    "login",
    "login_in_background",
    "extract_token",
    "probe",
    "session_handle",
    "submit",
]
