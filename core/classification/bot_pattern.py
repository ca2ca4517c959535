"""
Bot Pattern Matcher

One disjunctive pattern over every bot label. Only "any match" matters.
"""

from core.classification.rules import BOT_PATTERN


def match_bot(user_agent: str) -> bool:
    # Alternation of literals: scanned over the full string, never clipped.
    # Generic labels ("bot", "spider", ...) also hit unrelated tokens containing them
    if not user_agent:
        return False

    return BOT_PATTERN.search(user_agent) is not None
