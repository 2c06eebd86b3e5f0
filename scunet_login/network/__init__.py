"""
Network operations module: HTTP client setup and the WLAN presence check.
"""

from scunet_login.network.client import build_session
from scunet_login.network.presence import check_network, current_ssid

__all__ = ["build_session", "check_network", "current_ssid"]
