"""
Classification Schemas and Type Definitions

Defines Pydantic schemas for the classification result record and for
validating the inputs of the version comparison predicate.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Literal


# ═══════════════════════════════════════════════════════════════════════════════
# DEVICE TYPES
# ═══════════════════════════════════════════════════════════════════════════════

DeviceType = Literal["mobile", "tablet", "desktop", "bot", "unknown"]

VersionOperator = Literal[">=", ">", "<", "<=", "==", "!="]


# ═══════════════════════════════════════════════════════════════════════════════
# CLASSIFICATION RESULT
# ═══════════════════════════════════════════════════════════════════════════════

class DeviceInfo(BaseModel):
    """
    Comprehensive classification of one User-Agent string.

    Every field matches what the standalone accessor returns for the
    same input. Absent values are None (strings) or False (flags).

    Examples:
        - Android Chrome → browser="Chrome Mobile", os="Android", device_type="mobile"
        - Googlebot      → is_bot=True, device_type="bot"
    """
    model_config = ConfigDict(frozen=True)

    user_agent: str = Field(
        ...,
        description="The User-Agent string that was classified"
    )

    browser: Optional[str] = Field(
        None,
        description="Detected browser label",
        examples=["Chrome", "Safari Mobile", "Edge"]
    )
    browser_version: Optional[str] = Field(
        None,
        description="Version captured by the matching browser rule",
        examples=["120.0.0.0", "17.1"]
    )

    os: Optional[str] = Field(
        None,
        description="Detected operating system label",
        examples=["Android", "iOS", "Windows 10"]
    )
    os_version: Optional[str] = Field(
        None,
        description="OS version with underscores normalized to dots",
        examples=["13", "17.1", "10.15.7"]
    )

    device_type: DeviceType = Field(
        "unknown",
        description="Device category under the configured precedence policy"
    )

    is_mobile: bool = False
    is_tablet: bool = False
    is_desktop: bool = False
    is_bot: bool = False
    is_electron: bool = False
    is_webview: bool = False

    formatted: str = Field(
        ...,
        description="Summary in the form 'Browser Version/OS'",
        examples=["Chrome Mobile 120.0.0.0/Android", "Unknown Unknown/Unknown"]
    )


# ═══════════════════════════════════════════════════════════════════════════════
# VERSION CHECK
# ═══════════════════════════════════════════════════════════════════════════════

class VersionCheckInput(BaseModel):
    """
    Arguments of is_browser_version().

    Operations:
        - browser: label compared case-insensitively with the detected browser
        - operator: one of >=, >, <, <=, ==, !=
        - version: dotted numeric version, e.g. "100.0"
    """
    browser: str = Field(..., min_length=1)
    operator: VersionOperator
    version: str = Field(..., min_length=1)
