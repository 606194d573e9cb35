"""
Constants and environment handling for hostprobe.

hostprobe has no configuration file. Well-known source locations, the
registry location of Windows release data and the public-IP services are
fixed here; debug behavior can be switched on through environment
variables.
"""

import enum
import os


def check_env(setting, default_value=None):
    """
    Read an environment variable, coercing it to the type of the default.

    Boolean defaults accept 'true'/'false' in any case; integer defaults
    accept decimal strings. Anything else is returned as the raw string.
    """
    value = os.environ.get(setting)
    if value is None:
        return default_value

    if isinstance(default_value, bool):
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False
        return default_value

    if isinstance(default_value, int):
        try:
            return int(value)
        except ValueError:
            return default_value

    return value


HOSTPROBE_DEBUG = check_env("HOSTPROBE_DEBUG", False)
HOSTPROBE_VERBOSE = check_env("HOSTPROBE_VERBOSE", False)


class EXIT_CODE(enum.IntEnum):
    SUCCESS = 0
    FAILURE = 1
    INVALID_ARGUMENTS = 2
    INTERRUPTED = 130


class OUTPUT_FORMAT(enum.Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


# Linux sources
OS_RELEASE_PATH = "/etc/os-release"
MACHINE_INFO_PATH = "/etc/machine-info"
CPUINFO_PATH = "/proc/cpuinfo"

# Present only when running under the Windows Subsystem for Linux
WSL_INTEROP_PATH = "/proc/sys/fs/binfmt_misc/WSLInterop"

# Windows sources
WINDOWS_HIVE = "HKEY_LOCAL_MACHINE"
WINDOWS_VERSION_SUBKEY = r"SOFTWARE\Microsoft\Windows NT\CurrentVersion"
WINDOWS_EDITION_VALUE = "EditionID"
WINDOWS_DISPLAY_VERSION_VALUE = "DisplayVersion"
# Builds before 20H2 only publish ReleaseId
WINDOWS_RELEASE_ID_VALUE = "ReleaseId"

# Public IP lookup, tried in order
PUBLIC_IP_SERVICES = [
    "https://api.ipify.org",
    "https://ifconfig.co/ip",
    "https://ipinfo.io/ip",
    "https://icanhazip.com",
    "https://checkip.amazonaws.com",
]
PUBLIC_IP_TIMEOUT = check_env("HOSTPROBE_IP_TIMEOUT", 3)

# Seconds to wait for lspci or system_profiler
GRAPHICS_COMMAND_TIMEOUT = check_env("HOSTPROBE_GRAPHICS_TIMEOUT", 5)
