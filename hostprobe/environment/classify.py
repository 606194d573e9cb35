"""
Canonical operating-system and architecture identifiers.

Raw platform strings are mapped onto two closed enumerations. The mapping
is total: anything not in the tables, including an empty string or a token
in the wrong case, classifies as ``Unknown``.

Public exports:
    OperatingSystem: Closed set of operating systems
    Architecture: Closed set of CPU architectures
    classify_os: Map a lowercase OS token to an OperatingSystem
    classify_arch: Map a lowercase architecture token to an Architecture
    current_os: Classify the running interpreter's OS
    current_arch: Classify the running interpreter's CPU architecture
"""

import enum
import platform
import sys


class OperatingSystem(enum.Enum):
    Linux = "linux"
    Android = "android"
    FreeBSD = "freebsd"
    DragonFlyBSD = "dragonfly"
    NetBSD = "netbsd"
    OpenBSD = "openbsd"
    Solaris = "solaris"
    MacOS = "macos"
    Windows = "windows"
    Unknown = "unknown"

    def __str__(self):
        return self.name


class Architecture(enum.Enum):
    X86 = "x86"
    X86_64 = "x86_64"
    Arm = "arm"
    Aarch64 = "aarch64"
    Loongarch64 = "loongarch64"
    M68k = "m68k"
    Csky = "csky"
    Mips = "mips"
    Mips64 = "mips64"
    Powerpc = "powerpc"
    Powerpc64 = "powerpc64"
    Riscv64 = "riscv64"
    S390x = "s390x"
    Sparc64 = "sparc64"
    Unknown = "unknown"

    def __str__(self):
        return self.name


# Canonical tokens first, then the spellings sys.platform, platform.system()
# and platform.machine() report for the same thing.
OS_TOKENS = {
    **{member.value: member for member in OperatingSystem if member is not OperatingSystem.Unknown},
    "darwin": OperatingSystem.MacOS,
    "win32": OperatingSystem.Windows,
    "cygwin": OperatingSystem.Windows,
    "msys": OperatingSystem.Windows,
    "sunos": OperatingSystem.Solaris,
    "sunos5": OperatingSystem.Solaris,
    "dragonflybsd": OperatingSystem.DragonFlyBSD,
}

ARCH_TOKENS = {
    **{member.value: member for member in Architecture if member is not Architecture.Unknown},
    "i386": Architecture.X86,
    "i486": Architecture.X86,
    "i586": Architecture.X86,
    "i686": Architecture.X86,
    "x86-64": Architecture.X86_64,
    "amd64": Architecture.X86_64,
    "x64": Architecture.X86_64,
    "armv6l": Architecture.Arm,
    "armv7l": Architecture.Arm,
    "armv8l": Architecture.Arm,
    "arm64": Architecture.Aarch64,
    "aarch64_be": Architecture.Aarch64,
    "loong64": Architecture.Loongarch64,
    "mipsel": Architecture.Mips,
    "mips64el": Architecture.Mips64,
    "ppc": Architecture.Powerpc,
    "ppc64": Architecture.Powerpc64,
    "ppc64le": Architecture.Powerpc64,
    "sparcv9": Architecture.Sparc64,
}


def classify_os(raw) -> OperatingSystem:
    """
    Map a raw OS token to an OperatingSystem.

    Matching is exact against lowercase tokens. Never raises.

    Examples:
        >>> classify_os("linux")
        <OperatingSystem.Linux: 'linux'>
        >>> classify_os("Linux")
        <OperatingSystem.Unknown: 'unknown'>
    """
    if not isinstance(raw, str):
        return OperatingSystem.Unknown
    return OS_TOKENS.get(raw, OperatingSystem.Unknown)


def classify_arch(raw) -> Architecture:
    """
    Map a raw architecture token to an Architecture.

    Matching is exact against lowercase tokens. Never raises.

    Examples:
        >>> classify_arch("x86_64")
        <Architecture.X86_64: 'x86_64'>
        >>> classify_arch("bogus")
        <Architecture.Unknown: 'unknown'>
    """
    if not isinstance(raw, str):
        return Architecture.Unknown
    return ARCH_TOKENS.get(raw, Architecture.Unknown)


def current_os() -> OperatingSystem:
    # Android reports "linux" from platform.system() on older interpreters
    if sys.platform == "android" or hasattr(sys, "getandroidapilevel"):
        return OperatingSystem.Android

    system = classify_os(platform.system().lower())
    if system is OperatingSystem.Unknown:
        # platform.system() returns '' when it cannot tell
        system = classify_os(sys.platform.lower())
    return system


def current_arch() -> Architecture:
    return classify_arch(platform.machine().lower())
