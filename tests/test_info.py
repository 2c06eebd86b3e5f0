"""
Tests for getOnlineUserInfo polling and remaining-time parsing.
"""

import json
import unittest
from unittest.mock import MagicMock, call

import requests

from scunet_login.auth.info import fetch_session_info, remaining_hours
from scunet_login.config import BASE_URL, INFO_RETRY_DELAY, USER_INFO_URL
from scunet_login.errors import InfoUnavailable
from scunet_login.types import SessionInfo


def _json_response(payload):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = 200
    resp.json.return_value = payload
    resp.text = json.dumps(payload)
    return resp


def _ball_info(seconds):
    return json.dumps([
        {"displayName": "在线时长", "value": "0", "type": "time"},
        {"displayName": "剩余时长", "value": seconds, "type": "time"},
    ])


WAIT = {"result": "wait", "message": "请稍候"}
SUCCESS = {
    "result": "success",
    "userName": "张三",
    "welcomeTip": "下午好",
    "ballInfo": _ball_info("7200"),
}


class TestRemainingHours(unittest.TestCase):
    def test_seconds_to_hours(self):
        self.assertEqual(remaining_hours(_ball_info("7200")), 2.0)

    def test_rounded_to_one_decimal(self):
        self.assertEqual(remaining_hours(_ball_info("4000")), 1.1)

    def test_ties_round_up(self):
        # 0.25 h and 0.75 h sit exactly between two tenths
        self.assertEqual(remaining_hours(_ball_info("900")), 0.3)
        self.assertEqual(remaining_hours(_ball_info("2700")), 0.8)

    def test_infinite_value(self):
        self.assertIsNone(remaining_hours(_ball_info("inf")))

    def test_empty_array(self):
        self.assertIsNone(remaining_hours("[]"))

    def test_single_entry(self):
        self.assertIsNone(remaining_hours('[{"value": "7200"}]'))

    def test_non_numeric_value(self):
        self.assertIsNone(remaining_hours(_ball_info("unlimited")))

    def test_null_value(self):
        self.assertIsNone(remaining_hours(_ball_info(None)))

    def test_missing_ball_info(self):
        self.assertIsNone(remaining_hours(None))
        self.assertIsNone(remaining_hours(""))

    def test_malformed_json(self):
        self.assertIsNone(remaining_hours("[{"))


class TestFetchSessionInfo(unittest.TestCase):
    def test_success_first_time(self):
        session = MagicMock()
        session.post.return_value = _json_response(SUCCESS)
        sleep = MagicMock()

        info = fetch_session_info(session, "42", sleep=sleep)

        self.assertEqual(info, SessionInfo("张三", "下午好", 2.0))
        args, kwargs = session.post.call_args
        self.assertEqual(args[0], BASE_URL + USER_INFO_URL)
        self.assertEqual(kwargs["data"], {"userIndex": "42"})
        sleep.assert_not_called()

    def test_success_on_fifth_attempt(self):
        session = MagicMock()
        session.post.side_effect = [_json_response(WAIT)] * 4 + [_json_response(SUCCESS)]
        sleep = MagicMock()

        info = fetch_session_info(session, "42", sleep=sleep)

        self.assertEqual(info.user_name, "张三")
        self.assertEqual(session.post.call_count, 5)
        self.assertEqual(sleep.call_args_list, [call(INFO_RETRY_DELAY)] * 4)

    def test_five_failures_is_info_unavailable(self):
        session = MagicMock()
        session.post.return_value = _json_response(WAIT)
        sleep = MagicMock()

        with self.assertRaises(InfoUnavailable) as ctx:
            fetch_session_info(session, "42", sleep=sleep)

        self.assertEqual(session.post.call_count, 5)
        self.assertEqual(sleep.call_count, 4)
        self.assertIn("may still have succeeded", str(ctx.exception))

    def test_campus_session_without_quota(self):
        session = MagicMock()
        session.post.return_value = _json_response(dict(SUCCESS, ballInfo="[]"))

        info = fetch_session_info(session, "42", sleep=MagicMock())

        self.assertIsNone(info.remaining_hours)


if __name__ == "__main__":
    unittest.main()
