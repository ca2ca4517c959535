"""
Device Pattern Matcher

Token and pattern checks for the device axis (mobile, tablet) and the
runtime flags (Electron, WebView).

Only the tablet pattern backtracks, so only it scans the bounded input;
the token and literal checks see the full string.
"""

from core.classification.rules import (
    MOBILE_TOKENS,
    TABLET_PATTERN,
    ELECTRON_PATTERN,
    WEBVIEW_PATTERN,
    bounded,
)


# ═══════════════════════════════════════════════════════════════════════════
# DEVICE AXIS
# ═══════════════════════════════════════════════════════════════════════════

def match_mobile(user_agent: str) -> bool:
    """
    Check for any mobile token (case-insensitive substring).

    Tokens: Mobile, Android, iPhone, iPad, iPod, BlackBerry, Windows Phone
    """
    if not user_agent:
        return False

    ua = user_agent.lower()

    return any(token.lower() in ua for token in MOBILE_TOKENS)


def match_tablet(user_agent: str) -> bool:
    """Check for iPad, Android without a later "Mobile", or "Tablet"."""
    ua = bounded(user_agent)
    if not ua:
        return False

    return TABLET_PATTERN.search(ua) is not None


# ═══════════════════════════════════════════════════════════════════════════
# RUNTIME FLAGS
# ═══════════════════════════════════════════════════════════════════════════

def match_electron(user_agent: str) -> bool:
    return bool(user_agent) and ELECTRON_PATTERN.search(user_agent) is not None


def match_webview(user_agent: str) -> bool:
    return bool(user_agent) and WEBVIEW_PATTERN.search(user_agent) is not None
