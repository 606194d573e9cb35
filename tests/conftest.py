"""
Shared pytest fixtures for hostprobe tests.

These fixtures write sample source files into a temporary directory and
provide fake providers, so no test reads the real /etc or /proc.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tests.fixtures import (
    SAMPLE_CPUINFO,
    SAMPLE_MACHINE_INFO,
    SAMPLE_OS_RELEASE,
    FakeCpuId,
    FakeGraphics,
    FakeNetwork,
    create_sample_args,
)
from hostprobe.interfaces.providers import GraphicsAdapter


# =============================================================================
# Source File Fixtures
# =============================================================================

@pytest.fixture
def write_source(tmp_path):
    """
    Return a helper that writes text to a file under tmp_path.

    Usage:
        def test_something(write_source):
            path = write_source("os-release", 'NAME="Example OS"\\n')
    """
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def os_release_file(write_source) -> Path:
    """Fedora 40 os-release file."""
    return write_source("os-release", SAMPLE_OS_RELEASE)


@pytest.fixture
def machine_info_file(write_source) -> Path:
    return write_source("machine-info", SAMPLE_MACHINE_INFO)


@pytest.fixture
def cpuinfo_file(write_source) -> Path:
    """Two-processor Xeon cpuinfo file."""
    return write_source("cpuinfo", SAMPLE_CPUINFO)


@pytest.fixture
def missing_file(tmp_path) -> Path:
    """Path inside tmp_path that does not exist."""
    return tmp_path / "does-not-exist"


# =============================================================================
# Provider Fixtures
# =============================================================================

@pytest.fixture
def fake_cpu():
    return FakeCpuId(brand="AMD Ryzen 9 7950X 16-Core Processor", cores=32)


@pytest.fixture
def fake_graphics():
    return FakeGraphics([
        GraphicsAdapter(name="NVIDIA GeForce RTX 4090", driver_version="550.54.14"),
        GraphicsAdapter(name="NVIDIA GeForce RTX 3060", driver_version="550.54.14"),
    ])


@pytest.fixture
def fake_network():
    return FakeNetwork("198.51.100.23")


# =============================================================================
# Argument and Logger Fixtures
# =============================================================================

@pytest.fixture
def sample_args():
    """Factory for parsed-argument namespaces."""
    return create_sample_args


@pytest.fixture
def mock_logger():
    """
    Create a mock logger that captures all log calls.

    Usage:
        def test_something(mock_logger):
            apply_logging_options(mock_logger, args)
    """
    logger = MagicMock()
    logger.handlers = []
    return logger


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove hostprobe-related environment variables.

    Usage:
        def test_check_env_default(clean_env):
            # HOSTPROBE_DEBUG etc. are guaranteed to be unset
            result = check_env('HOSTPROBE_DEBUG', False)
            assert result is False
    """
    env_vars = ['HOSTPROBE_DEBUG', 'HOSTPROBE_VERBOSE', 'HOSTPROBE_IP_TIMEOUT']
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
