"""
Environment detection for hostprobe.

This package classifies the running platform and reads host facts from
well-known sources.

Key features:
- Total classification of OS and architecture strings (Unknown catch-all)
- Linux distribution facts from /etc/os-release
- CPU model and core counts from /proc/cpuinfo
- WSL detection
- Windows edition and version through a registry provider
- Host profile assembly with substitutable providers

Public exports:
    OperatingSystem, Architecture: Canonical enumerations
    classify_os, classify_arch: Map raw tokens to the enumerations
    current_os, current_arch: Classify the running interpreter
    OSProfile: Data class containing operating system information
    detect_os: Function to detect current OS and distribution
    cpu, gpu, public_ip: Provider-backed facts
"""

from hostprobe.environment.classify import (
    OperatingSystem,
    Architecture,
    classify_os,
    classify_arch,
    current_os,
    current_arch,
)
from hostprobe.environment.facts import (
    LinuxRelease,
    WindowsRelease,
    distro_name,
    distro_pretty_name,
    distro_id,
    distro_version,
    cpe_name,
    platform_id,
    pretty_hostname,
    hostname,
    cpu_model,
    cpu_core_count,
    cpu_logical_count,
    is_subsystem,
    linux_release,
    windows_release,
)
from hostprobe.environment.os_detect import OSProfile, detect_os, cpu, gpu, public_ip

__all__ = [
    # Classification
    "OperatingSystem",
    "Architecture",
    "classify_os",
    "classify_arch",
    "current_os",
    "current_arch",
    # Facts
    "LinuxRelease",
    "WindowsRelease",
    "distro_name",
    "distro_pretty_name",
    "distro_id",
    "distro_version",
    "cpe_name",
    "platform_id",
    "pretty_hostname",
    "hostname",
    "cpu_model",
    "cpu_core_count",
    "cpu_logical_count",
    "is_subsystem",
    "linux_release",
    "windows_release",
    # Profile assembly
    "OSProfile",
    "detect_os",
    "cpu",
    "gpu",
    "public_ip",
]
