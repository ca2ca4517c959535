"""
Browser Pattern Matcher

Scans the ordered browser table and reports the first matching label.
The version comes from the same entry's capture groups.
"""

from typing import Optional, Tuple

from core.classification.rules import BROWSER_RULES, bounded, first_group
from infra.logger import logger_browser, log_match


# ═══════════════════════════════════════════════════════════════════════════
# TABLE SCAN
# ═══════════════════════════════════════════════════════════════════════════

def match_browser_rule(user_agent: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Find the first browser rule matching the User-Agent.

    Args:
        user_agent: Raw User-Agent string

    Returns:
        (label, version) of the winning rule, or (None, None)

    Examples:
        "... Chrome/119.0.0.0 Safari/537.36 Edg/120.0.0.0" → ("Edge", "120.0.0.0")
        "... Chrome/120.0.0.0 Mobile Safari/537.36"        → ("Chrome Mobile", "120.0.0.0")
        "curl/8.4.0"                                       → (None, None)
    """
    ua = bounded(user_agent)
    if not ua:
        return (None, None)

    for label, pattern in BROWSER_RULES:
        match = pattern.search(ua)
        if match:
            log_match(logger_browser, "browser", label, ua)
            return (label, first_group(match))

    log_match(logger_browser, "browser", None, ua)
    return (None, None)


# ═══════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════

def match_browser(user_agent: str) -> Optional[str]:
    """Label of the detected browser, or None."""
    return match_browser_rule(user_agent)[0]


def match_browser_version(user_agent: str) -> Optional[str]:
    """
    Version of the detected browser, or None.

    Rules without a capture group (e.g. "iOS WebView") yield None.
    """
    return match_browser_rule(user_agent)[1]
