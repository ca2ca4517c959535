"""
Classification Layer

Ordered rule tables and the primitive matchers built on them.
"""

from .browser_pattern import match_browser, match_browser_version
from .os_pattern import match_os, match_os_version
from .bot_pattern import match_bot
from .device_pattern import match_mobile, match_tablet, match_electron, match_webview

__all__ = [
    "match_browser",
    "match_browser_version",
    "match_os",
    "match_os_version",
    "match_bot",
    "match_mobile",
    "match_tablet",
    "match_electron",
    "match_webview",
]
