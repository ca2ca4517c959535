"""
User-Agent Classifier

Public surface of the engine. Every accessor takes an optional User-Agent
string; None means "the active request's header", fetched through the
injected header source.

Provides:
1. UserAgent - classifier with injectable request collaborators
2. Module-level functions bound to a default, environment-backed instance
"""

from typing import Callable, Optional

from pydantic import ValidationError

from app.config import (
    AVAILABLE_POLICIES,
    DEVICE_TYPE_POLICY,
    DEFAULT_TRUNCATE_LENGTH,
    FORMATTED_TEMPLATE,
    MAX_MATCH_LENGTH,
    UNKNOWN_LABEL,
    is_bot_first,
)
from core.classification import (
    match_browser,
    match_browser_version,
    match_os,
    match_os_version,
    match_bot,
    match_mobile,
    match_tablet,
    match_electron,
    match_webview,
)
from core.classification.browser_pattern import match_browser_rule
from core.classification.version import compare_versions
from infra.logger import logger_api, logger_device, log_device_info, log_input_clipped
from infra.request_context import current_header, host_mobile_hint
from tools.schemas import DeviceInfo, DeviceType, VersionCheckInput
from tools.text.truncate import truncate


HeaderSource = Callable[[], str]
MobileHint = Callable[[], bool]


def format_summary(browser: Optional[str], version: Optional[str], os: Optional[str]) -> str:
    return FORMATTED_TEMPLATE.format(
        browser=browser or UNKNOWN_LABEL,
        version=version or UNKNOWN_LABEL,
        os=os or UNKNOWN_LABEL,
    )


class UserAgent:
    """
    Classifies User-Agent strings along browser, OS, device and runtime axes.

    All methods are pure functions of the resolved string and the static
    rule tables; an instance only holds its collaborators and policy, so
    one instance can be shared between threads.
    """

    def __init__(
        self,
        header_source: Optional[HeaderSource] = None,
        mobile_hint: Optional[MobileHint] = None,
        policy: Optional[str] = None
    ):
        """
        Args:
            header_source: Returns the active request's sanitized User-Agent
            mobile_hint: Host mobile signal for is_mobile() without input;
                defaults to the token check on header_source()
            policy: "bot_first" or "sibling"; defaults to DEVICE_TYPE_POLICY

        Raises:
            ValueError: If policy is not a known policy
        """
        self.header_source = header_source or current_header
        self.mobile_hint = mobile_hint
        self.policy = policy or DEVICE_TYPE_POLICY

        if self.policy not in AVAILABLE_POLICIES:
            raise ValueError(f"Invalid device type policy: {self.policy}")


    # ═══════════════════════════════════════════════════════════════════════
    # INPUT RESOLUTION
    # ═══════════════════════════════════════════════════════════════════════

    def resolve(self, user_agent: Optional[str] = None) -> str:
        """Explicit string, or the ambient header when None."""
        ua = self.header_source() if user_agent is None else user_agent
        return ua or ""


    def get(self) -> str:
        """The active request's User-Agent ("" when absent)."""
        return self.resolve(None)


    def get_truncated(self, user_agent: Optional[str] = None, max_length: int = DEFAULT_TRUNCATE_LENGTH) -> str:
        """User-Agent cut to max_length for storage, with "..." when shortened."""
        return truncate(self.resolve(user_agent), max_length)


    # ═══════════════════════════════════════════════════════════════════════
    # BROWSER & OS
    # ═══════════════════════════════════════════════════════════════════════

    def get_browser(self, user_agent: Optional[str] = None) -> Optional[str]:
        return match_browser(self.resolve(user_agent))


    def get_browser_version(self, user_agent: Optional[str] = None) -> Optional[str]:
        return match_browser_version(self.resolve(user_agent))


    def get_os(self, user_agent: Optional[str] = None) -> Optional[str]:
        return match_os(self.resolve(user_agent))


    def get_os_version(self, user_agent: Optional[str] = None) -> Optional[str]:
        return match_os_version(self.resolve(user_agent))


    # ═══════════════════════════════════════════════════════════════════════
    # DEVICE AXIS
    # ═══════════════════════════════════════════════════════════════════════

    def is_mobile(self, user_agent: Optional[str] = None) -> bool:
        """
        Check for a mobile device.

        Without an explicit string the host mobile hint decides, since the
        host may know more than the raw header.
        """
        if user_agent is None:
            if self.mobile_hint is not None:
                return bool(self.mobile_hint())
            return match_mobile(self.header_source())

        return match_mobile(user_agent)


    def is_tablet(self, user_agent: Optional[str] = None) -> bool:
        return match_tablet(self.resolve(user_agent))


    def is_desktop(self, user_agent: Optional[str] = None) -> bool:
        """Neither mobile nor tablet. False for an empty User-Agent."""
        if not self.resolve(user_agent):
            return False

        return not self.is_mobile(user_agent) and not self.is_tablet(user_agent)


    def is_bot(self, user_agent: Optional[str] = None) -> bool:
        return match_bot(self.resolve(user_agent))


    def is_electron(self, user_agent: Optional[str] = None) -> bool:
        return match_electron(self.resolve(user_agent))


    def is_webview(self, user_agent: Optional[str] = None) -> bool:
        return match_webview(self.resolve(user_agent))


    def get_device_type(self, user_agent: Optional[str] = None) -> DeviceType:
        """
        Classify into mobile, tablet, desktop, bot or unknown.

        Precedence under "bot_first": bot → mobile → tablet → desktop.
        Under "sibling" bots are classified by their device tokens and
        only reported through is_bot().

        The ambient header is resolved first, so the mobile hint is not
        consulted here.
        """
        ua = self.resolve(user_agent)
        if not ua:
            return "unknown"

        if is_bot_first(self.policy) and self.is_bot(ua):
            device_type = "bot"
        elif self.is_mobile(ua):
            device_type = "mobile"
        elif self.is_tablet(ua):
            device_type = "tablet"
        elif self.is_desktop(ua):
            device_type = "desktop"
        else:
            device_type = "unknown"

        logger_device.debug(f"DEVICE_TYPE | type={device_type} | policy={self.policy}")
        return device_type


    # ═══════════════════════════════════════════════════════════════════════
    # BROWSER CHECKS
    # ═══════════════════════════════════════════════════════════════════════

    def is_browser(self, browser: str, user_agent: Optional[str] = None) -> bool:
        """Detected browser equals `browser` (case-insensitive)."""
        detected = self.get_browser(user_agent)
        if not detected or not browser:
            return False

        return detected.lower() == browser.lower()


    def is_browser_version(
        self,
        browser: str,
        operator: str,
        version: str,
        user_agent: Optional[str] = None
    ) -> bool:
        """
        Check the detected browser's version against a criterion.

        Args:
            browser: Browser label (case-insensitive)
            operator: One of >=, >, <, <=, ==, !=
            version: Dotted version to compare against
            user_agent: Optional User-Agent string

        Returns:
            False on browser mismatch, missing version or invalid arguments

        Examples:
            is_browser_version("Chrome", ">=", "100.0", chrome_120_ua) → True
            is_browser_version("Chrome", ">=", "100.0", firefox_ua)    → False
        """
        try:
            check = VersionCheckInput(browser=browser, operator=operator, version=version)
        except ValidationError as e:
            logger_api.debug(f"VERSION_CHECK_INVALID | errors={e.error_count()}")
            return False

        ua = self.resolve(user_agent)
        if not self.is_browser(check.browser, ua):
            return False

        detected = self.get_browser_version(ua)
        if not detected:
            return False

        return bool(compare_versions(detected, check.version, check.operator))


    # ═══════════════════════════════════════════════════════════════════════
    # SUMMARIES
    # ═══════════════════════════════════════════════════════════════════════

    def get_formatted(self, user_agent: Optional[str] = None) -> str:
        """Summary as "Browser Version/OS", e.g. "Firefox 121.0/Windows 10"."""
        ua = self.resolve(user_agent)
        browser, version = match_browser_rule(ua)

        return format_summary(browser, version, self.get_os(ua))


    def get_device_info(self, user_agent: Optional[str] = None) -> DeviceInfo:
        """
        Comprehensive classification record.

        Resolves the input once and classifies that string, so each field
        equals the standalone accessor's result. The browser table is
        scanned once for label, version and summary.
        """
        ua = self.resolve(user_agent)

        if len(ua) > MAX_MATCH_LENGTH:
            log_input_clipped(len(ua), MAX_MATCH_LENGTH)

        browser, version = match_browser_rule(ua)
        os = self.get_os(ua)

        info = DeviceInfo(
            user_agent=ua,
            browser=browser,
            browser_version=version,
            os=os,
            os_version=self.get_os_version(ua),
            device_type=self.get_device_type(ua),
            is_mobile=self.is_mobile(ua),
            is_tablet=self.is_tablet(ua),
            is_desktop=self.is_desktop(ua),
            is_bot=self.is_bot(ua),
            is_electron=self.is_electron(ua),
            is_webview=self.is_webview(ua),
            formatted=format_summary(browser, version, os),
        )

        log_device_info(info.model_dump())
        return info


# ═══════════════════════════════════════════════════════════════════════════
# PUBLIC API
# ═══════════════════════════════════════════════════════════════════════════

default_agent = UserAgent(header_source=current_header, mobile_hint=host_mobile_hint)

get_user_agent = default_agent.get
get_truncated = default_agent.get_truncated
get_browser = default_agent.get_browser
get_browser_version = default_agent.get_browser_version
get_os = default_agent.get_os
get_os_version = default_agent.get_os_version
is_mobile = default_agent.is_mobile
is_tablet = default_agent.is_tablet
is_desktop = default_agent.is_desktop
is_bot = default_agent.is_bot
is_electron = default_agent.is_electron
is_webview = default_agent.is_webview
get_device_type = default_agent.get_device_type
get_formatted = default_agent.get_formatted
is_browser = default_agent.is_browser
is_browser_version = default_agent.is_browser_version
get_device_info = default_agent.get_device_info
