"""
Test fixtures package for hostprobe tests.

This package provides sample file contents and in-memory providers
for testing the extractor, the host facts and profile assembly.
"""

from tests.fixtures.fake_providers import FakeCpuId, FakeGraphics, FakeNetwork, FakeRegistry
from tests.fixtures.sample_data import (
    SAMPLE_OS_RELEASE,
    SAMPLE_OS_RELEASE_UBUNTU,
    SAMPLE_OS_RELEASE_ROLLING,
    SAMPLE_MACHINE_INFO,
    SAMPLE_CPUINFO,
    SAMPLE_CPUINFO_ARM,
    SAMPLE_CPUINFO_BAD_COUNTS,
    create_sample_args,
)

__all__ = [
    # Fake providers
    'FakeRegistry',
    'FakeCpuId',
    'FakeGraphics',
    'FakeNetwork',
    # Sample data
    'SAMPLE_OS_RELEASE',
    'SAMPLE_OS_RELEASE_UBUNTU',
    'SAMPLE_OS_RELEASE_ROLLING',
    'SAMPLE_MACHINE_INFO',
    'SAMPLE_CPUINFO',
    'SAMPLE_CPUINFO_ARM',
    'SAMPLE_CPUINFO_BAD_COUNTS',
    'create_sample_args',
]
