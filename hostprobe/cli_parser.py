"""
CLI argument parsing for hostprobe.
"""

import argparse
import sys

from hostprobe import VERSION
from hostprobe.config import EXIT_CODE, OUTPUT_FORMAT
from hostprobe.probe_logging import LOG_LEVEL_NAMES
from hostprobe.reporting import FormatRegistry

# Facts that can be queried one at a time with `hostprobe fact <name>`
FACT_NAMES = [
    'distro_name',
    'distro_pretty_name',
    'distro_id',
    'distro_version',
    'cpe_name',
    'platform_id',
    'pretty_hostname',
    'hostname',
    'cpu_model',
    'cpu_core_count',
    'cpu_logical_count',
    'is_wsl',
    'os',
    'arch',
]

# Facts that read a file and therefore accept --source
SOURCE_FACTS = {
    'distro_name', 'distro_pretty_name', 'distro_id', 'distro_version',
    'cpe_name', 'platform_id', 'pretty_hostname',
    'cpu_model', 'cpu_core_count', 'cpu_logical_count',
}

help_messages = {
    'os': "Operating system, architecture and distribution or edition.",
    'cpu': "CPU model and logical core count.",
    'gpu': "First graphics adapter and its driver version.",
    'ip': "Public IP address of this host (makes an outbound HTTPS request).",
    'all': "Every section above. Sections whose provider is unavailable are left empty.",
    'fact': "A single fact by name.",
    'format': "Output format.",
    'source': "Read an alternate file with the same layout as the default source.",
    'os_release': "Alternate os-release file to read on Linux.",
    'skip_ip': "Do not perform the public IP lookup.",
}


def add_universal_arguments(parser):
    """Add arguments common to all commands.

    Args:
        parser: Argparse parser to add arguments to.
    """
    output_control = parser.add_argument_group("Output Control")
    output_control.add_argument(
        "--format", "-f",
        choices=FormatRegistry.available_formats(),
        default=OUTPUT_FORMAT.TEXT.value,
        help=help_messages['format']
    )
    output_control.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode"
    )
    output_control.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose mode"
    )
    output_control.add_argument(
        "--stream-log-level",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        default=None,
        metavar="LEVEL",
        help=f"Log level for messages on stderr, one of {', '.join(LOG_LEVEL_NAMES)} (overrides --verbose/--debug)"
    )


def build_parser():
    parser = argparse.ArgumentParser(prog="hostprobe", description="Report facts about the host this runs on")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    commands = parser.add_subparsers(dest="command", required=True)

    os_parser = commands.add_parser("os", help=help_messages['os'])
    os_parser.add_argument("--os-release", type=str, default=None, help=help_messages['os_release'])

    commands.add_parser("cpu", help=help_messages['cpu'])
    commands.add_parser("gpu", help=help_messages['gpu'])
    commands.add_parser("ip", help=help_messages['ip'])

    all_parser = commands.add_parser("all", help=help_messages['all'])
    all_parser.add_argument("--os-release", type=str, default=None, help=help_messages['os_release'])
    all_parser.add_argument("--skip-ip", action="store_true", help=help_messages['skip_ip'])

    fact_parser = commands.add_parser("fact", help=help_messages['fact'])
    fact_parser.add_argument("name", choices=FACT_NAMES)
    fact_parser.add_argument("--source", type=str, default=None, help=help_messages['source'])

    for sub_parser in commands.choices.values():
        add_universal_arguments(sub_parser)

    return parser


def validate_args(args):
    error_messages = []
    if args.command == "fact" and args.source and args.name not in SOURCE_FACTS:
        error_messages.append(f"Fact '{args.name}' does not read a file; --source is not supported")

    if error_messages:
        for msg in error_messages:
            print(msg, file=sys.stderr)

        sys.exit(EXIT_CODE.INVALID_ARGUMENTS)


def parse_arguments(argv=None):
    """Parse command-line arguments for hostprobe.

    Args:
        argv: Argument list; defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed and validated arguments.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_help(sys.stderr)
        sys.exit(EXIT_CODE.INVALID_ARGUMENTS)

    parsed_args = parser.parse_args(argv)
    validate_args(parsed_args)
    return parsed_args
