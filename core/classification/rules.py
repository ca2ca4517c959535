"""
Classification Rule Tables

Ordered (label, pattern) tables for browsers and operating systems, plus the
flat bot label list. Patterns are compiled once at import time and the
tables are tuples, so nothing here changes after startup.

Order matters: within each table the first matching entry wins, so more
specific patterns come before generic ones that would also match.
"""

import re
from types import MappingProxyType
from typing import Optional, Pattern, Tuple

from app.config import MAX_MATCH_LENGTH


Rule = Tuple[str, Pattern]


def _compile(pattern: str) -> Pattern:
    return re.compile(pattern, re.IGNORECASE)


# ═══════════════════════════════════════════════════════════════════════════════
# BROWSERS
# ═══════════════════════════════════════════════════════════════════════════════

# Most specific patterns FIRST
BROWSER_PATTERNS: Tuple[Tuple[str, str], ...] = (
    # Electron-based applications
    ("Electron", r"Electron/([0-9.]+)"),

    # Mobile WebViews (before mobile browsers)
    ("Android WebView", r"Android.*wv.*Chrome/([0-9.]+)"),
    ("iOS WebView", r"Mobile.*Safari.*AppleWebKit(?!.*Version)"),

    # Specific mobile browsers
    ("Chrome iOS", r"CriOS/([0-9.]+)"),
    ("Firefox iOS", r"FxiOS/([0-9.]+)"),
    ("DuckDuckGo iOS", r"DuckDuckGo/([0-9.]+)"),
    ("Safari Mobile", r"(?:iPhone|iPad|iPod).+Version/([0-9.]+).+Safari"),
    ("Samsung Browser", r"SamsungBrowser/([0-9.]+)"),
    ("UC Browser", r"UCBrowser/([0-9.]+)"),

    # Desktop browsers with their own token (before generic Chrome)
    ("Edge", r"Edg(?:e|A|iOS)?/([0-9.]+)"),
    ("Opera", r"OPR/([0-9.]+)|Opera/([0-9.]+)"),
    ("Brave", r"Brave/([0-9.]+)"),
    ("Vivaldi", r"Vivaldi/([0-9.]+)"),
    ("Chrome OS", r"CrOS.+Chrome/([0-9.]+)"),

    # Generic patterns
    ("Chrome Mobile", r"Chrome/([0-9.]+).*Mobile(?!.*(?:Edge|OPR|Opera|Brave|Vivaldi))"),
    ("Chrome", r"Chrome/([0-9.]+)(?!.*(?:Edge|OPR|Opera|Brave|Vivaldi|Mobile|wv))"),
    ("Firefox", r"Firefox/([0-9.]+)"),
    ("Safari", r"Version/([0-9.]+).+Safari(?!.*Chrome)"),

    # Legacy
    ("Internet Explorer", r"MSIE ([0-9.]+)|Trident.*rv:([0-9.]+)"),
)

BROWSER_RULES: Tuple[Rule, ...] = tuple(
    (label, _compile(pattern)) for label, pattern in BROWSER_PATTERNS
)


# ═══════════════════════════════════════════════════════════════════════════════
# OPERATING SYSTEMS
# ═══════════════════════════════════════════════════════════════════════════════

OS_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("iOS", r"iPhone OS ([0-9._]+)|iPad.*OS ([0-9._]+)|iPod.*OS ([0-9._]+)|CPU.*OS ([0-9._]+)"),
    ("Android", r"Android ([0-9.]+)"),
    ("Windows 11", r"Windows NT 10\.0.*(?:Build 22000|Build 22H2)"),
    ("Windows 10", r"Windows NT 10\.0"),
    ("Windows", r"Windows NT ([0-9.]+)"),
    ("macOS", r"Mac OS X ([0-9._]+)|Intel Mac OS X ([0-9._]+)"),
    ("Linux", r"Linux(?!.*Android)"),
    ("Chrome OS", r"CrOS"),
    ("Ubuntu", r"Ubuntu"),
)

OS_RULES: Tuple[Rule, ...] = tuple(
    (label, _compile(pattern)) for label, pattern in OS_PATTERNS
)

# Label → compiled pattern, for version lookups of an already matched OS
OS_RULE_BY_LABEL = MappingProxyType(dict(OS_RULES))


# ═══════════════════════════════════════════════════════════════════════════════
# BOTS
# ═══════════════════════════════════════════════════════════════════════════════

BOT_LABELS: Tuple[str, ...] = (
    # Search engines
    "Googlebot",
    "Google-InspectionTool",
    "Google-Extended",
    "GoogleOther",
    "bingbot",
    "BingPreview",
    "Baiduspider",
    "DuckDuckBot",
    "YandexBot",

    # AI / LLM crawlers
    "GPTBot",
    "ChatGPT-User",
    "OAI-SearchBot",
    "ClaudeBot",
    "Claude-Web",
    "PerplexityBot",
    "Meta-ExternalAgent",
    "CCBot",
    "ImagesiftBot",
    "Bytespider",
    "Anthropic-AI",

    # Social media previewers
    "facebookexternalhit",
    "Twitterbot",
    "LinkedInBot",
    "WhatsApp",
    "TelegramBot",
    "Slackbot",
    "Discordbot",

    # SEO and other crawlers
    "Applebot",
    "SemrushBot",
    "AhrefsBot",
    "MJ12bot",
    "DotBot",

    # Generic substrings (match anywhere, including inside unrelated tokens)
    "spider",
    "crawler",
    "bot",
    "scraper",
)

BOT_PATTERN: Pattern = _compile("|".join(re.escape(label) for label in BOT_LABELS))


# ═══════════════════════════════════════════════════════════════════════════════
# DEVICE & RUNTIME SIGNALS
# ═══════════════════════════════════════════════════════════════════════════════

MOBILE_TOKENS: Tuple[str, ...] = (
    "Mobile",
    "Android",
    "iPhone",
    "iPad",
    "iPod",
    "BlackBerry",
    "Windows Phone",
)

# Android tablets omit the "Mobile" token
TABLET_PATTERN: Pattern = _compile(r"iPad|Android(?!.*Mobile)|Tablet")

ELECTRON_PATTERN: Pattern = _compile(r"Electron")

WEBVIEW_PATTERN: Pattern = _compile(r"wv|WebView")


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT BOUNDING
# ═══════════════════════════════════════════════════════════════════════════════

def bounded(user_agent: Optional[str]) -> str:
    """
    Prepare a User-Agent for matching.

    None becomes "". Input longer than MAX_MATCH_LENGTH is cut so that the
    cost of the lookahead-heavy patterns stays bounded. Used only by the
    backtracking scans (browser table, OS table, tablet pattern).
    """
    if not user_agent:
        return ""

    if len(user_agent) > MAX_MATCH_LENGTH:
        return user_agent[:MAX_MATCH_LENGTH]

    return user_agent


def first_group(match) -> Optional[str]:
    """First non-empty capture group of a match, left to right."""
    if match is None:
        return None

    for group in match.groups():
        if group:
            return group

    return None
