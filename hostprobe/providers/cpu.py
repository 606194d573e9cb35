"""
CPU identification provider.

The brand string comes from py-cpuinfo (CPUID on x86, /proc/cpuinfo or
sysctl elsewhere); the logical processor count comes from psutil.
"""

import logging

import cpuinfo
import psutil

from hostprobe.error_messages import format_error
from hostprobe.errors import ProviderUnavailable
from hostprobe.interfaces.providers import CpuIdProvider

logger = logging.getLogger(__name__)


class CpuInfoProvider(CpuIdProvider):
    """CpuIdProvider backed by py-cpuinfo and psutil."""

    def is_available(self) -> bool:
        return True

    def brand_string(self) -> str:
        try:
            info = cpuinfo.get_cpu_info()
        except Exception as e:
            raise ProviderUnavailable(
                format_error('CPU_IDENTIFICATION_FAILED', error=e),
                provider=self.name,
                reason=type(e).__name__,
            ) from e

        brand = (info.get("brand_raw") or "").strip()
        if not brand:
            raise ProviderUnavailable(
                format_error('CPU_BRAND_MISSING'),
                provider=self.name,
                reason="brand_raw missing",
            )
        logger.debug(f"CPU brand string: {brand}")
        return brand

    def logical_core_count(self) -> int:
        count = psutil.cpu_count(logical=True)
        if not count:
            raise ProviderUnavailable(
                format_error('CPU_COUNT_UNDETERMINED'),
                provider=self.name,
                reason="psutil.cpu_count returned None",
            )
        return count
