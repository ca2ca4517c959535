"""
Ambient Request Context

Default collaborators that supply the active request's User-Agent and the
host's mobile signal. Values are read from the CGI/WSGI style environment
(HTTP_USER_AGENT, HTTP_SEC_CH_UA_MOBILE). Hosts with their own request
object inject replacements into core.user_agent.UserAgent instead.
"""

import os
import re
from typing import Optional

from app.config import USER_AGENT_ENV_KEY, MOBILE_HINT_ENV_KEY
from core.classification.device_pattern import match_mobile


_SLASH_ESCAPE = re.compile(r"\\(.?)", re.DOTALL)
_SCRIPT_OR_STYLE = re.compile(r"<(script|style)[^>]*?>.*?</\1>", re.IGNORECASE | re.DOTALL)
_TAG = re.compile(r"<[^>]*>")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


# ═══════════════════════════════════════════════════════════════════════════════
# SANITIZATION
# ═══════════════════════════════════════════════════════════════════════════════

def unslash(value: str) -> str:
    """Remove backslash escaping ("\\'" → "'", "\\\\" → "\\")."""
    return _SLASH_ESCAPE.sub(r"\1", value)


def strip_tags(value: str) -> str:
    """Drop script/style blocks and any tag-like markup."""
    value = _SCRIPT_OR_STYLE.sub("", value)
    return _TAG.sub("", value)


def sanitize_header(value: Optional[str]) -> str:
    """
    Make a raw header value safe for classification.

    Args:
        value: Raw header value (may be None)

    Returns:
        Unslashed value without markup or control characters, stripped
    """
    if not value:
        return ""

    value = strip_tags(unslash(value))
    return _CONTROL_CHARS.sub("", value).strip()


# ═══════════════════════════════════════════════════════════════════════════════
# COLLABORATORS
# ═══════════════════════════════════════════════════════════════════════════════

def current_header() -> str:
    """Sanitized User-Agent of the active request, or "" if none present."""
    return sanitize_header(os.environ.get(USER_AGENT_ENV_KEY))


def host_mobile_hint() -> bool:
    """
    Host-provided mobile signal.

    Uses the Sec-CH-UA-Mobile client hint ("?1" / "?0") when the host
    forwarded it, otherwise the token check on the current header.
    """
    hint = os.environ.get(MOBILE_HINT_ENV_KEY, "").strip()
    if hint == "?1":
        return True
    if hint == "?0":
        return False

    return match_mobile(current_header())
