"""
Operating System Pattern Matcher

Same first-match scan as the browser matcher, over the OS table.
"""

from typing import Optional

from core.classification.rules import OS_RULES, OS_RULE_BY_LABEL, bounded, first_group
from infra.logger import logger_os, log_match


def match_os(user_agent: str) -> Optional[str]:
    """
    Label of the first OS rule matching the User-Agent.

    Examples:
        "(iPhone; CPU iPhone OS 17_1 like Mac OS X)"  → "iOS"
        "(Linux; Android 13; SM-G998B)"              → "Android"
        "(X11; Linux x86_64)"                        → "Linux"
    """
    ua = bounded(user_agent)
    if not ua:
        return None

    for label, pattern in OS_RULES:
        if pattern.search(ua):
            log_match(logger_os, "os", label, ua)
            return label

    log_match(logger_os, "os", None, ua)
    return None


def match_os_version(user_agent: str) -> Optional[str]:
    """
    Version of the detected OS, or None.

    Re-runs only the matched label's pattern. Underscore separators
    ("17_1", "10_15_7") are normalized to dots.
    """
    label = match_os(user_agent)
    if label is None:
        return None

    version = first_group(OS_RULE_BY_LABEL[label].search(bounded(user_agent)))
    if version is None:
        return None

    return version.replace("_", ".")
