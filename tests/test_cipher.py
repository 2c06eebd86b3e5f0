"""
Tests for password encryption – mac extraction, pageInfo key fetch, RSA.
"""

import unittest
from unittest.mock import MagicMock

import requests

from scunet_login.auth.cipher import (
    encrypt_password,
    extract_mac,
    fetch_public_key,
    is_encrypted,
    rsa_encrypt,
)
from scunet_login.config import BASE_URL, PAGE_INFO_URL
from scunet_login.errors import GatewayResponseError, GatewayUnreachable
from scunet_login.types import PublicKey

# Two Mersenne primes give a 648-bit test modulus with a known private key.
P = 2 ** 127 - 1
Q = 2 ** 521 - 1
N = P * Q
E = 0x10001
D = pow(E, -1, (P - 1) * (Q - 1))
KEY = PublicKey(modulus=N, exponent=E)

TOKEN = "wlanuserip=10.132.44.7&nasip=192.168.2.1&mac=AA:BB:CC:DD:EE:FF&t=wireless-v2"


def _decrypt(hex_text: str) -> str:
    m = pow(int(hex_text, 16), D, N)
    return m.to_bytes((m.bit_length() + 7) // 8, "big").decode("utf-8")


def _json_response(payload):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = 200
    resp.json.return_value = payload
    resp.text = str(payload)
    return resp


def _page_info_session():
    session = MagicMock()
    session.post.return_value = _json_response({
        "publicKeyModulus": format(N, "x"),
        "publicKeyExponent": "10001",
    })
    return session


class TestRsaEncrypt(unittest.TestCase):
    def test_textbook_example(self):
        # m=65, e=17, n=3233 -> c=2790
        self.assertEqual(rsa_encrypt("A", PublicKey(modulus=3233, exponent=17)), "ae6")

    def test_decrypts_back_to_message(self):
        for msg in (
            "hunter2>AA:BB:CC:DD:EE:FF",
            "p@ss w0rd!>00:11:22:33:44:55",
            "密码>AA:BB:CC:DD:EE:FF",
            ">",
        ):
            with self.subTest(msg=msg):
                self.assertEqual(_decrypt(rsa_encrypt(msg, KEY)), msg)

    def test_output_is_lowercase_hex_within_modulus_size(self):
        result = rsa_encrypt("hunter2>AA:BB:CC:DD:EE:FF", KEY)
        self.assertEqual(result, result.lower())
        int(result, 16)
        self.assertLessEqual(len(result), ((N.bit_length() + 7) // 8) * 2)


class TestIsEncrypted(unittest.TestCase):
    def test_256_hex_chars(self):
        self.assertTrue(is_encrypted("a1" * 128))

    def test_255_chars(self):
        self.assertFalse(is_encrypted("a" * 255))

    def test_256_non_hex_chars(self):
        self.assertFalse(is_encrypted("z" * 256))


class TestExtractMac(unittest.TestCase):
    def test_plain(self):
        self.assertEqual(extract_mac(TOKEN), "AA:BB:CC:DD:EE:FF")

    def test_percent_encoded(self):
        self.assertEqual(extract_mac("mac=aa%3Abb%3Acc%3Add%3Aee%3Aff&x=1"), "aa:bb:cc:dd:ee:ff")

    def test_missing(self):
        with self.assertRaises(GatewayResponseError):
            extract_mac("wlanuserip=10.132.44.7&nasip=192.168.2.1")


class TestFetchPublicKey(unittest.TestCase):
    def test_parses_hex_fields(self):
        session = _page_info_session()

        key = fetch_public_key(session, TOKEN)

        self.assertEqual(key, KEY)
        args, kwargs = session.post.call_args
        self.assertEqual(args[0], BASE_URL + PAGE_INFO_URL)
        self.assertEqual(kwargs["data"], {"queryString": TOKEN})

    def test_missing_fields(self):
        session = MagicMock()
        session.post.return_value = _json_response({"publicKeyExponent": "10001"})

        with self.assertRaises(GatewayResponseError):
            fetch_public_key(session, TOKEN)

    def test_non_json(self):
        session = MagicMock()
        resp = _json_response(None)
        resp.json.side_effect = ValueError("Expecting value")
        session.post.return_value = resp

        with self.assertRaises(GatewayResponseError):
            fetch_public_key(session, TOKEN)

    def test_transport_error(self):
        session = MagicMock()
        session.post.side_effect = requests.Timeout("read timed out")

        with self.assertRaises(GatewayUnreachable):
            fetch_public_key(session, TOKEN)


class TestEncryptPassword(unittest.TestCase):
    def test_encrypts_password_and_mac(self):
        session = _page_info_session()

        result = encrypt_password(session, "hunter2", TOKEN)

        self.assertEqual(_decrypt(result), "hunter2>AA:BB:CC:DD:EE:FF")

    def test_already_encrypted_passes_through(self):
        session = MagicMock()
        credential = "0123456789abcdef" * 16

        self.assertEqual(encrypt_password(session, credential, TOKEN), credential)
        session.post.assert_not_called()

    def test_255_chars_is_encrypted(self):
        session = _page_info_session()
        credential = "a" * 255

        result = encrypt_password(session, credential, TOKEN)

        session.post.assert_called_once()
        self.assertNotEqual(result, credential)


if __name__ == "__main__":
    unittest.main()
