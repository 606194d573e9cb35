"""
Provider interface definitions for hostprobe.

Facts that do not come from a text file are delegated to providers: the
Windows registry, CPU identification, graphics adapter enumeration and a
public-IP lookup. Each provider exposes one method per operation so that
callers can substitute fakes in tests without touching real hardware, a
real registry or the network.

Every provider method either returns a value or raises
``hostprobe.errors.ProviderUnavailable``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class GraphicsAdapter:
    """A graphics adapter reported by a GraphicsProvider.

    Attributes:
        name: Adapter model name as reported by the driver or OS.
        driver_version: Driver version string, or None when the backend
            does not report one (lspci, system_profiler).
    """
    name: str
    driver_version: Optional[str] = None


@dataclass
class Processor:
    """CPU model and logical core count.

    Attributes:
        model: Brand string, e.g. 'AMD Ryzen 9 7950X 16-Core Processor'.
        cores: Logical processor count.
    """
    model: str
    cores: int


class ProviderInterface(ABC):
    """Common base for all providers."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this provider can be used on the current host.

        Returns:
            True if the provider's backing facility is present.
        """
        pass

    @property
    def name(self) -> str:
        return type(self).__name__


class RegistryProvider(ProviderInterface):
    """Read-only access to a hierarchical key/value registry.

    Example:
        class FakeRegistry(RegistryProvider):
            def __init__(self, values):
                self.values = values

            def get_string(self, hive, subkey, value_name):
                return self.values[(hive, subkey, value_name)]

            def is_available(self):
                return True
    """

    @abstractmethod
    def get_string(self, hive: str, subkey: str, value_name: str) -> str:
        """Read a string value.

        Args:
            hive: Root key name, e.g. 'HKEY_LOCAL_MACHINE'.
            subkey: Backslash-separated path below the hive.
            value_name: Name of the value to read.

        Returns:
            The stored string.
        """
        pass


class CpuIdProvider(ProviderInterface):
    """CPU identification."""

    @abstractmethod
    def brand_string(self) -> str:
        """Return the processor brand string."""
        pass

    @abstractmethod
    def logical_core_count(self) -> int:
        """Return the number of logical processors."""
        pass


class GraphicsProvider(ProviderInterface):
    """Graphics adapter enumeration."""

    @abstractmethod
    def enumerate_adapters(self) -> List[GraphicsAdapter]:
        """Return every adapter the backend can see, possibly none."""
        pass


class NetworkProvider(ProviderInterface):
    """Outbound lookups."""

    @abstractmethod
    def public_ip(self) -> str:
        """Return the host's public IP address as seen from the internet."""
        pass
