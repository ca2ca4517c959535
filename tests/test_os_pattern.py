"""
Test suite for operating system pattern matcher
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.classification.os_pattern import match_os, match_os_version
from samples import *


def test_match_os():
    """Test OS detection."""
    
    print("Testing match_os...")
    
    assert match_os(IPHONE_SAFARI) == "iOS"
    assert match_os(IPAD_SAFARI) == "iOS"
    assert match_os(ANDROID_CHROME) == "Android"
    assert match_os(CHROME_WINDOWS) == "Windows 10"
    assert match_os(OPERA_PRESTO) == "Windows"
    assert match_os(SAFARI_MAC) == "macOS"
    assert match_os(FIREFOX_LINUX) == "Linux"
    assert match_os(CHROMEBOOK) == "Chrome OS"
    
    print("✓ match_os tests passed")


def test_table_order():
    """Earlier entries win over later ones."""
    
    # Android UAs also carry "Linux"
    assert match_os(ANDROID_CHROME) == "Android"
    
    # Ubuntu UAs also carry "Linux", which is declared first
    assert match_os(FIREFOX_UBUNTU) == "Linux"
    
    assert match_os("Mozilla/5.0 (Windows NT 10.0; Win64; x64; Build 22000)") == "Windows 11"


def test_match_os_version():
    """Test OS version extraction and underscore normalization."""
    
    print("Testing match_os_version...")
    
    assert match_os_version(IPHONE_SAFARI) == "17.1"
    assert match_os_version(IPAD_SAFARI) == "17.1"
    assert match_os_version(SAFARI_MAC) == "10.15.7"
    assert match_os_version(ANDROID_CHROME) == "13"
    assert match_os_version(OPERA_PRESTO) == "6.1"
    
    # Rules without a capture group
    assert match_os_version(CHROME_WINDOWS) is None
    assert match_os_version(FIREFOX_LINUX) is None
    
    print("✓ match_os_version tests passed")


def test_no_os():
    """Unmatched and empty input."""
    
    for ua in [CURL, GOOGLEBOT, "", None]:
        assert match_os(ua) is None
        assert match_os_version(ua) is None
