"""
Host profile assembly for hostprobe.

This module combines the platform classifier, the Linux facts and the
external providers into the records the command line reports.

Public exports:
    OSProfile: Data class containing operating system information
    detect_os: Function to detect current OS, architecture and release
    cpu: CPU model and logical core count
    gpu: First graphics adapter, if any
    public_ip: Public IP address of the host
"""

import logging
import platform
from dataclasses import dataclass
from typing import Optional

from hostprobe.config import WSL_INTEROP_PATH
from hostprobe.environment.classify import (
    Architecture,
    OperatingSystem,
    current_arch,
    current_os,
)
from hostprobe.environment.facts import (
    is_subsystem,
    linux_release,
    windows_release,
)
from hostprobe.interfaces.providers import (
    CpuIdProvider,
    GraphicsAdapter,
    GraphicsProvider,
    NetworkProvider,
    Processor,
    RegistryProvider,
)

logger = logging.getLogger(__name__)


@dataclass
class OSProfile:
    """
    Operating system information for the running host.

    Attributes:
        os: Canonical operating system
        arch: Canonical CPU architecture
        kernel_release: Kernel release string ('6.8.5-301.fc40.x86_64', '10', ...)
        win_edition: Windows edition ('Professional', 'ServerStandard', ...)
        win_version: Windows display version ('23H2', ...); None when unpublished
        is_wsl: Whether a Linux host runs under WSL
        linux_distro: Distribution pretty name ('Fedora Linux 40 (Workstation Edition)')
        distro_version: Distribution version ('40'); None for rolling releases
    """
    os: OperatingSystem
    arch: Architecture
    kernel_release: str = ""
    win_edition: Optional[str] = None
    win_version: Optional[str] = None
    is_wsl: Optional[bool] = None
    linux_distro: Optional[str] = None
    distro_version: Optional[str] = None


def detect_os(registry: Optional[RegistryProvider] = None, os_release=None,
              wsl_marker=WSL_INTEROP_PATH) -> OSProfile:
    """
    Detect the current operating system, architecture and release.

    Linux hosts get their distribution from os-release and a WSL check;
    Windows hosts get edition and version from the registry. Other systems
    only carry the classification and kernel release.

    Args:
        registry: Registry provider for Windows; defaults to the real registry.
        os_release: Alternate os-release file to read on Linux.
        wsl_marker: Alternate WSL marker path.

    Returns:
        OSProfile: Detected operating system information

    Raises:
        HostProbeException: A required fact for the detected OS is unavailable.

    Examples:
        >>> profile = detect_os()
        >>> profile.os
        <OperatingSystem.Linux: 'linux'>
        >>> profile.linux_distro
        'Fedora Linux 40 (Workstation Edition)'
    """
    profile = OSProfile(
        os=current_os(),
        arch=current_arch(),
        kernel_release=platform.release(),
    )
    logger.debug(f"Classified host as {profile.os}/{profile.arch}")

    if profile.os is OperatingSystem.Linux:
        release = linux_release(os_release)
        profile.linux_distro = release.distro
        profile.distro_version = release.version_id
        profile.is_wsl = is_subsystem(wsl_marker)

    elif profile.os is OperatingSystem.Windows:
        if registry is None:
            from hostprobe.providers.registry import WinRegistryProvider
            registry = WinRegistryProvider()
        release = windows_release(registry)
        profile.win_edition = release.edition
        profile.win_version = release.version

    return profile


def cpu(provider: Optional[CpuIdProvider] = None) -> Processor:
    """Return the CPU model and logical core count."""
    if provider is None:
        from hostprobe.providers.cpu import CpuInfoProvider
        provider = CpuInfoProvider()
    return Processor(
        model=provider.brand_string(),
        cores=provider.logical_core_count(),
    )


def gpu(provider: Optional[GraphicsProvider] = None) -> Optional[GraphicsAdapter]:
    """
    Return the first graphics adapter, or None when there is none.

    The default provider asks NVML first and then the operating system's
    own device inventory, so adapters from any vendor are found.
    """
    if provider is None:
        from hostprobe.providers.graphics import FallbackGraphicsProvider
        provider = FallbackGraphicsProvider()

    adapters = provider.enumerate_adapters()
    if not adapters:
        logger.debug(f"{provider.name} found no graphics adapters")
        return None
    return adapters[0]


def public_ip(provider: Optional[NetworkProvider] = None) -> str:
    if provider is None:
        from hostprobe.providers.network import HttpPublicIpProvider
        provider = HttpPublicIpProvider()
    return provider.public_ip()
