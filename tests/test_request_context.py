"""
Test suite for the ambient request collaborators and module-level API
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import core.user_agent as user_agent
from infra.request_context import (
    sanitize_header,
    strip_tags,
    unslash,
    current_header,
    host_mobile_hint,
)
from samples import *


@pytest.fixture
def request_env(monkeypatch):
    """Clean CGI-style request environment."""
    monkeypatch.delenv("HTTP_USER_AGENT", raising=False)
    monkeypatch.delenv("HTTP_SEC_CH_UA_MOBILE", raising=False)
    return monkeypatch


def test_sanitize_header():
    """Test unslashing and markup removal."""
    
    print("Testing sanitize_header...")
    
    assert unslash("It\\'s") == "It's"
    assert unslash("a\\\\b") == "a\\b"
    assert strip_tags("Mozilla/5.0 <b>bold</b>") == "Mozilla/5.0 bold"
    assert sanitize_header("Mozilla/5.0 <script>alert(1)</script>(X11)") == "Mozilla/5.0 (X11)"
    assert sanitize_header("  curl/8.4.0\x00\r\n ") == "curl/8.4.0"
    assert sanitize_header(None) == ""
    assert sanitize_header("") == ""
    
    print("✓ sanitize_header tests passed")


def test_current_header(request_env):
    """Header comes from HTTP_USER_AGENT."""
    
    assert current_header() == ""
    
    request_env.setenv("HTTP_USER_AGENT", IPHONE_SAFARI)
    assert current_header() == IPHONE_SAFARI


def test_host_mobile_hint(request_env):
    """Client hint wins; otherwise the header is parsed."""
    
    request_env.setenv("HTTP_USER_AGENT", CHROME_WINDOWS)
    assert host_mobile_hint() == False
    
    request_env.setenv("HTTP_SEC_CH_UA_MOBILE", "?1")
    assert host_mobile_hint() == True
    
    request_env.setenv("HTTP_USER_AGENT", ANDROID_CHROME)
    request_env.setenv("HTTP_SEC_CH_UA_MOBILE", "?0")
    assert host_mobile_hint() == False


def test_module_api(request_env):
    """Module-level functions read the ambient request."""
    
    request_env.setenv("HTTP_USER_AGENT", ANDROID_CHROME)
    
    assert user_agent.get_user_agent() == ANDROID_CHROME
    assert user_agent.get_browser() == "Chrome Mobile"
    assert user_agent.get_browser_version() == "120.0.0.0"
    assert user_agent.get_os() == "Android"
    assert user_agent.is_mobile() == True
    assert user_agent.get_device_type() == "mobile"
    assert user_agent.is_browser_version("Chrome Mobile", ">=", "100") == True
    assert user_agent.get_device_info().formatted == "Chrome Mobile 120.0.0.0/Android"
    
    # Explicit strings ignore the ambient request
    assert user_agent.get_browser(FIREFOX_LINUX) == "Firefox"
    assert user_agent.is_bot(GOOGLEBOT) == True


def test_module_api_without_request(request_env):
    """No request header gives neutral values."""
    
    assert user_agent.get_user_agent() == ""
    assert user_agent.get_browser() is None
    assert user_agent.is_mobile() == False
    assert user_agent.is_desktop() == False
    assert user_agent.get_device_type() == "unknown"
    assert user_agent.get_truncated() == ""
