"""
Windows registry provider backed by the standard ``winreg`` module.
"""

import logging
import sys

from hostprobe.error_messages import format_error
from hostprobe.errors import ProviderUnavailable
from hostprobe.interfaces.providers import RegistryProvider

logger = logging.getLogger(__name__)


class WinRegistryProvider(RegistryProvider):
    """Read string values from the local Windows registry."""

    def is_available(self) -> bool:
        return sys.platform == "win32"

    def _winreg(self):
        if not self.is_available():
            raise ProviderUnavailable(
                format_error('PROVIDER_WRONG_PLATFORM', provider=self.name, platform="Windows"),
                provider=self.name,
                reason=f"running on {sys.platform}",
            )
        import winreg
        return winreg

    def get_string(self, hive: str, subkey: str, value_name: str) -> str:
        winreg = self._winreg()
        root = getattr(winreg, hive, None)
        if root is None:
            raise ValueError(f"Unknown registry hive: {hive!r}")

        target = f"{hive}\\{subkey}\\{value_name}"
        logger.debug(f"Reading registry value {target}")
        try:
            with winreg.OpenKey(root, subkey) as key:
                value, value_type = winreg.QueryValueEx(key, value_name)
        except OSError as e:
            raise ProviderUnavailable(
                format_error('PROVIDER_ACCESS_DENIED', provider=self.name, target=target, error=e),
                provider=self.name,
                reason=str(e),
            ) from e

        if value_type not in (winreg.REG_SZ, winreg.REG_EXPAND_SZ):
            raise ProviderUnavailable(
                format_error('PROVIDER_ACCESS_DENIED', provider=self.name, target=target,
                             error=f"value is not a string (type {value_type})"),
                provider=self.name,
                reason="not a string value",
            )
        return value
