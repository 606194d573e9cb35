"""
Interface definitions for hostprobe.

This package defines the abstract interfaces (contracts) that external
capability providers must implement. Using interfaces enables:

- **Testability**: Providers can be replaced by fakes in unit tests
- **Extensibility**: New backends can be added without modifying core code
- **Consistency**: All providers follow the same contract

Provider Interfaces:
    - RegistryProvider: Windows registry string lookup
    - CpuIdProvider: CPU brand string and logical core count
    - GraphicsProvider: Graphics adapter enumeration
    - NetworkProvider: Public IP lookup

Records:
    - GraphicsAdapter: Adapter name and driver version
    - Processor: CPU model and core count
"""

from hostprobe.interfaces.providers import (
    ProviderInterface,
    RegistryProvider,
    CpuIdProvider,
    GraphicsProvider,
    NetworkProvider,
    GraphicsAdapter,
    Processor,
)

__all__ = [
    'ProviderInterface',
    'RegistryProvider',
    'CpuIdProvider',
    'GraphicsProvider',
    'NetworkProvider',
    'GraphicsAdapter',
    'Processor',
]
