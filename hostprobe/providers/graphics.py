"""
Graphics adapter enumeration.

NvmlGraphicsProvider asks the NVIDIA driver. SystemGraphicsProvider asks the
operating system's own device inventory and sees adapters from any vendor:

- Windows: WMI ``Win32_VideoController``
- Linux: display-class devices listed by ``lspci``
- macOS: ``system_profiler SPDisplaysDataType -json``

FallbackGraphicsProvider chains providers and answers with the first one
that finds an adapter.
"""

import json
import logging
import subprocess
import sys
from typing import List, Optional, Sequence

import pynvml

from hostprobe.config import GRAPHICS_COMMAND_TIMEOUT
from hostprobe.error_messages import format_error
from hostprobe.errors import ProviderUnavailable
from hostprobe.interfaces.providers import GraphicsAdapter, GraphicsProvider

logger = logging.getLogger(__name__)

# lspci device classes that drive a display or do 3D work
LSPCI_DISPLAY_CLASSES = ("VGA", "Display", "3D")


def _text(value) -> str:
    # Older pynvml releases return bytes
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class NvmlGraphicsProvider(GraphicsProvider):
    """Enumerate adapters managed by the NVIDIA driver."""

    def is_available(self) -> bool:
        try:
            pynvml.nvmlInit()
        except pynvml.NVMLError:
            return False
        pynvml.nvmlShutdown()
        return True

    def enumerate_adapters(self) -> List[GraphicsAdapter]:
        try:
            pynvml.nvmlInit()
        except pynvml.NVMLError as e:
            raise ProviderUnavailable(
                format_error('PROVIDER_ACCESS_DENIED', provider=self.name, target="NVML", error=e),
                provider=self.name,
                reason=str(e),
            ) from e

        try:
            driver_version = _text(pynvml.nvmlSystemGetDriverVersion())
            adapters = []
            for index in range(pynvml.nvmlDeviceGetCount()):
                handle = pynvml.nvmlDeviceGetHandleByIndex(index)
                adapters.append(GraphicsAdapter(
                    name=_text(pynvml.nvmlDeviceGetName(handle)),
                    driver_version=driver_version,
                ))
        except pynvml.NVMLError as e:
            raise ProviderUnavailable(
                format_error('PROVIDER_ACCESS_DENIED', provider=self.name, target="GPU devices", error=e),
                provider=self.name,
                reason=str(e),
            ) from e
        finally:
            pynvml.nvmlShutdown()

        logger.debug(f"NVML reported {len(adapters)} adapter(s)")
        return adapters


def parse_lspci(output: str) -> List[GraphicsAdapter]:
    """
    Pick the display adapters out of plain ``lspci`` output.

    Args:
        output: lspci stdout, one device per line, e.g.
            ``00:02.0 VGA compatible controller: Intel Corporation UHD Graphics 630``

    Returns:
        List[GraphicsAdapter]: Adapters in bus order, without driver versions.
    """
    adapters = []
    for line in output.strip().split('\n'):
        slot_and_class, separator, description = line.partition(': ')
        if not separator:
            continue
        if any(device_class in slot_and_class for device_class in LSPCI_DISPLAY_CLASSES):
            adapters.append(GraphicsAdapter(name=description.strip()))
    return adapters


def parse_system_profiler(output: str) -> List[GraphicsAdapter]:
    """Read the display controllers from ``system_profiler SPDisplaysDataType -json``."""
    data = json.loads(output)
    adapters = []
    for controller in data.get("SPDisplaysDataType", []):
        # Apple silicon and discrete GPUs use sppci_model; some Intel parts only the chipset key
        name = controller.get("sppci_model") or controller.get("spdisplays_chipset-model")
        if name:
            adapters.append(GraphicsAdapter(name=name))
    return adapters


class SystemGraphicsProvider(GraphicsProvider):
    """Enumerate adapters of every vendor through the operating system."""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout if timeout is not None else GRAPHICS_COMMAND_TIMEOUT

    def is_available(self) -> bool:
        return sys.platform == "win32" or sys.platform == "darwin" or sys.platform.startswith("linux")

    def enumerate_adapters(self) -> List[GraphicsAdapter]:
        if sys.platform == "win32":
            adapters = self._from_wmi()
        elif sys.platform == "darwin":
            output = self._run(["system_profiler", "SPDisplaysDataType", "-json"])
            try:
                adapters = parse_system_profiler(output)
            except ValueError as e:
                raise ProviderUnavailable(
                    format_error('PROVIDER_COMMAND_FAILED', provider=self.name,
                                 command="system_profiler", error=e),
                    provider=self.name,
                    reason="invalid JSON",
                ) from e
        elif sys.platform.startswith("linux"):
            adapters = parse_lspci(self._run(["lspci"]))
        else:
            raise ProviderUnavailable(
                format_error('PROVIDER_WRONG_PLATFORM', provider=self.name, platform="Windows, Linux or macOS"),
                provider=self.name,
                reason=sys.platform,
            )

        logger.debug(f"{self.name} reported {len(adapters)} adapter(s)")
        return adapters

    def _run(self, command: List[str]) -> str:
        try:
            result = subprocess.run(command, capture_output=True, text=True,
                                    timeout=self.timeout, check=True)
        except (OSError, subprocess.SubprocessError) as e:
            raise ProviderUnavailable(
                format_error('PROVIDER_COMMAND_FAILED', provider=self.name, command=command[0], error=e),
                provider=self.name,
                reason=type(e).__name__,
                suggestion=f"Check that '{command[0]}' is installed and on PATH",
            ) from e
        return result.stdout

    def _from_wmi(self) -> List[GraphicsAdapter]:
        try:
            import wmi
        except ImportError as e:
            raise ProviderUnavailable(
                format_error('PROVIDER_MISSING_LIBRARY', provider=self.name, library="wmi", error=e),
                provider=self.name,
                reason="wmi not installed",
                suggestion="Install the 'wmi' package",
            ) from e

        try:
            controllers = wmi.WMI().Win32_VideoController()
        except Exception as e:
            raise ProviderUnavailable(
                format_error('PROVIDER_ACCESS_DENIED', provider=self.name, target="Win32_VideoController", error=e),
                provider=self.name,
                reason=type(e).__name__,
            ) from e

        return [
            GraphicsAdapter(name=controller.Name, driver_version=controller.DriverVersion or None)
            for controller in controllers
            if controller.Name
        ]


class FallbackGraphicsProvider(GraphicsProvider):
    """
    Try several providers in order.

    The first provider that returns adapters answers. A provider that is
    unavailable is skipped. If every provider is unavailable the failure is
    raised; if some provider worked but none found an adapter the result is
    an empty list.
    """

    def __init__(self, providers: Optional[Sequence[GraphicsProvider]] = None):
        if providers is None:
            providers = [NvmlGraphicsProvider(), SystemGraphicsProvider()]
        self.providers = list(providers)

    def is_available(self) -> bool:
        return any(provider.is_available() for provider in self.providers)

    def enumerate_adapters(self) -> List[GraphicsAdapter]:
        failures = []
        answered = False
        for provider in self.providers:
            try:
                adapters = provider.enumerate_adapters()
            except ProviderUnavailable as e:
                logger.debug(f"{provider.name} unavailable: {e.error.message}")
                failures.append(f"{provider.name} ({e.error.message})")
                continue

            if adapters:
                return adapters
            answered = True

        if answered:
            return []

        raise ProviderUnavailable(
            format_error('NO_GRAPHICS_PROVIDER', providers="; ".join(failures) or "none"),
            provider=self.name,
            reason="every provider failed",
        )
