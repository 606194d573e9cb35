"""
Concrete providers for the interfaces in ``hostprobe.interfaces``.
"""

from hostprobe.providers.cpu import CpuInfoProvider
from hostprobe.providers.graphics import (
    FallbackGraphicsProvider,
    NvmlGraphicsProvider,
    SystemGraphicsProvider,
)
from hostprobe.providers.network import HttpPublicIpProvider
from hostprobe.providers.registry import WinRegistryProvider

__all__ = [
    'CpuInfoProvider',
    'NvmlGraphicsProvider',
    'SystemGraphicsProvider',
    'FallbackGraphicsProvider',
    'HttpPublicIpProvider',
    'WinRegistryProvider',
]
