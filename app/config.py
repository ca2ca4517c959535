"""
Classifier Configuration

Centralized configuration for the User-Agent classification engine.
Environment overrides are loaded through infra.env.
"""

from typing import Literal

from infra.env import get_env


# ═══════════════════════════════════════════════════════════════════════════════
# DEVICE CLASSIFICATION
# ═══════════════════════════════════════════════════════════════════════════════

# Device type precedence policies
# - bot_first: bot → mobile → tablet → desktop → unknown
# - sibling:   mobile → tablet → desktop → unknown (bot reported only as is_bot)
DevicePolicy = Literal["bot_first", "sibling"]

AVAILABLE_POLICIES = ("bot_first", "sibling")

# Active policy for get_device_type()
DEVICE_TYPE_POLICY: DevicePolicy = get_env("UA_DEVICE_TYPE_POLICY", "bot_first")


# ═══════════════════════════════════════════════════════════════════════════════
# INPUT LIMITS
# ═══════════════════════════════════════════════════════════════════════════════

# Only this many leading characters of a User-Agent are scanned by the matchers
MAX_MATCH_LENGTH: int = 1000

# Default storage length for get_truncated()
DEFAULT_TRUNCATE_LENGTH: int = 500

# Suffix appended by truncate() (counted inside max_length)
TRUNCATE_SUFFIX: str = "..."


# ═══════════════════════════════════════════════════════════════════════════════
# AMBIENT REQUEST
# ═══════════════════════════════════════════════════════════════════════════════

# CGI/WSGI environ key carrying the active request's User-Agent
USER_AGENT_ENV_KEY: str = "HTTP_USER_AGENT"

# Client hint header (Sec-CH-UA-Mobile) used as the host mobile signal
MOBILE_HINT_ENV_KEY: str = "HTTP_SEC_CH_UA_MOBILE"


# ═══════════════════════════════════════════════════════════════════════════════
# FORMATTING
# ═══════════════════════════════════════════════════════════════════════════════

# Placeholder for missing browser / version / OS in get_formatted()
UNKNOWN_LABEL: str = "Unknown"

# "{browser} {version}/{os}"
FORMATTED_TEMPLATE: str = "{browser} {version}/{os}"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

# Log level for the application
LOG_LEVEL: str = get_env("UA_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL

# Enable file logging
ENABLE_FILE_LOGGING: bool = False

# Log file path
LOG_FILE_PATH: str = "runtime/logs/useragent.log"


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def is_bot_first(policy: str = None) -> bool:
    """Check if bots pre-empt the device type decision"""
    return (policy or DEVICE_TYPE_POLICY) == "bot_first"


def validate_config():
    """Validate configuration on startup"""
    assert DEVICE_TYPE_POLICY in AVAILABLE_POLICIES, f"Invalid DEVICE_TYPE_POLICY: {DEVICE_TYPE_POLICY}"
    assert MAX_MATCH_LENGTH > 0, "MAX_MATCH_LENGTH must be positive"
    assert DEFAULT_TRUNCATE_LENGTH > len(TRUNCATE_SUFFIX), "DEFAULT_TRUNCATE_LENGTH too small"
    assert LOG_LEVEL.upper() in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"), f"Invalid LOG_LEVEL: {LOG_LEVEL}"


# Validate on import
validate_config()
