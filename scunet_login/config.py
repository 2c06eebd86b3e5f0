"""Configuration constants for the SCUNET eportal login client."""

import os

GATEWAY_HOST = "192.168.2.135"
BASE_URL     = f"http://{GATEWAY_HOST}"

# Credentials can also be supplied via SCUNET_STUDENT_ID / SCUNET_PASSWORD env vars
DEFAULT_USER     = os.environ.get("SCUNET_STUDENT_ID", "")
DEFAULT_PASSWORD = os.environ.get("SCUNET_PASSWORD", "")
DEFAULT_SERVICE  = os.environ.get("SCUNET_SERVICE", "internet")

PAGE_INFO_URL   = "/eportal/InterFace.do?method=pageInfo"
LOGIN_URL       = "/eportal/InterFace.do?method=login"
USER_INFO_URL   = "/eportal/InterFace.do?method=getOnlineUserInfo"

REQUEST_TIMEOUT        = 10    # seconds per HTTP request
CONNECT_RETRIES        = 2     # TCP connect retries only, never on status
BOOT_SETTLE_DELAY      = 2.0   # interface is not always up right after boot
INFO_MAX_ATTEMPTS      = 5     # getOnlineUserInfo polls before giving up
INFO_RETRY_DELAY       = 0.5
PRESENCE_BOOT_ATTEMPTS = 5     # SSID checks when launched at boot (1 otherwise)
PRESENCE_RETRY_DELAY   = 1.0

EXPECTED_SSID = "SCUNET"

# Sent on every gateway request; the eportal pages expect a desktop browser
USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

# The unauthenticated root page is a one-line script redirect:
#   <script>top.self.location.href='http://192.168.2.135/eportal/index.jsp?<token>'</script>\r\n
# The token sits between these two fixed offsets.
TOKEN_HEAD_OFFSET = 71
TOKEN_TAIL_OFFSET = 12

# Hex length of a credential already encrypted with the gateway's 1024-bit key
ENCRYPTED_CREDENTIAL_LENGTH = 256

# Carrier egress rejects the terminal; the campus egress usually accepts it
FALLBACK_SIGNATURE = "terminal failed"
