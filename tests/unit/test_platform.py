"""
Unit Tests for Platform Detection
=================================
"""

import pytest
from unittest.mock import patch

from phantompdf.core.exceptions import PDFGenerationError, UnsupportedPlatformError
from phantompdf.core.platform import OSPlatform, detect_platform


class TestDetectPlatform:
    """Test host operating system classification."""

    @pytest.mark.parametrize(
        "system, expected",
        [
            ("Linux", OSPlatform.LINUX),
            ("Windows", OSPlatform.WINDOWS),
            ("Darwin", OSPlatform.MACOS),
            ("linux", OSPlatform.LINUX),
        ],
    )
    def test_known_systems(self, system, expected):
        """Test classifying supported systems."""
        assert detect_platform(system) is expected

    @pytest.mark.parametrize("system", ["SunOS", "FreeBSD", "Java", ""])
    def test_unknown_systems_raise(self, system):
        """Test that unsupported systems are fatal."""
        with pytest.raises(UnsupportedPlatformError, match="could not be classified"):
            detect_platform(system)

    def test_defaults_to_platform_system(self):
        """Test that the host is probed when no name is given."""
        with patch("phantompdf.core.platform.platform.system", return_value="Darwin"):
            assert detect_platform() is OSPlatform.MACOS

    def test_error_hierarchy(self):
        """Test that platform errors share the package base class."""
        assert issubclass(UnsupportedPlatformError, PDFGenerationError)


class TestExecutableName:
    """Test executable selection per platform."""

    def test_executable_names(self):
        assert OSPlatform.LINUX.executable_name == "linux64_phantomjs.exe"
        assert OSPlatform.WINDOWS.executable_name == "windows_phantomjs.exe"
        assert OSPlatform.MACOS.executable_name == "osx_phantomjs.exe"
