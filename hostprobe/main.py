#!/usr/bin/env python3
"""
hostprobe - Main Entry Point

This module provides the command line entry point: it parses arguments,
runs the requested probes, renders the report and maps failures to exit
codes with user-friendly messages.
"""

import signal
import sys
import traceback

from hostprobe.cli_parser import parse_arguments
from hostprobe.config import EXIT_CODE, HOSTPROBE_DEBUG, HOSTPROBE_VERBOSE
from hostprobe.environment import (
    cpu,
    cpu_core_count,
    cpu_logical_count,
    cpu_model,
    cpe_name,
    current_arch,
    current_os,
    detect_os,
    distro_id,
    distro_name,
    distro_pretty_name,
    distro_version,
    gpu,
    hostname,
    is_subsystem,
    platform_id,
    pretty_hostname,
    public_ip,
)
from hostprobe.error_messages import ErrorFormatter, format_error
from hostprobe.errors import HostProbeException, ProviderUnavailable
from hostprobe.probe_logging import DEFAULT_STREAM_LOG_LEVEL, VERBOSE, apply_logging_options, setup_logging
from hostprobe.reporting import FormatRegistry

logger = setup_logging("hostprobe", stream_log_level=VERBOSE if HOSTPROBE_VERBOSE else DEFAULT_STREAM_LOG_LEVEL)
error_formatter = ErrorFormatter(use_colors=sys.stderr.isatty())

# Name -> (callable, accepts a source path)
FACTS = {
    'distro_name': (distro_name, True),
    'distro_pretty_name': (distro_pretty_name, True),
    'distro_id': (distro_id, True),
    'distro_version': (distro_version, True),
    'cpe_name': (cpe_name, True),
    'platform_id': (platform_id, True),
    'pretty_hostname': (pretty_hostname, True),
    'hostname': (hostname, False),
    'cpu_model': (cpu_model, True),
    'cpu_core_count': (cpu_core_count, True),
    'cpu_logical_count': (cpu_logical_count, True),
    'is_wsl': (is_subsystem, False),
    'os': (current_os, False),
    'arch': (current_arch, False),
}


def signal_handler(sig, frame):
    """Handle SIGTERM by exiting with the interrupted code."""
    logger.warning(f"Received signal {signal.Signals(sig).name} ({sig})")
    sys.exit(EXIT_CODE.INTERRUPTED)


def _optional_section(name, probe):
    """Run a probe for the `all` report; an unavailable provider leaves the section empty."""
    try:
        return probe()
    except ProviderUnavailable as e:
        logger.warning(f"Skipping {name}: {e.error.message}")
        return None


def build_report(args):
    """
    Run the probes selected by ``args.command``.

    Returns:
        dict: Section name to record, in display order.
    """
    command = args.command
    if command == "os":
        return {'os': detect_os(os_release=args.os_release)}
    if command == "cpu":
        return {'cpu': cpu()}
    if command == "gpu":
        return {'gpu': gpu()}
    if command == "ip":
        return {'public_ip': public_ip()}
    if command == "fact":
        fact, takes_source = FACTS[args.name]
        value = fact(args.source) if takes_source else fact()
        return {args.name: value}

    report = {
        'os': detect_os(os_release=args.os_release),
        'hostname': hostname(),
        'cpu': _optional_section('cpu', cpu),
        'gpu': _optional_section('gpu', gpu),
    }
    if not args.skip_ip:
        report['public_ip'] = _optional_section('public_ip', public_ip)
    return report


def _main_impl(argv=None):
    """
    Main implementation with error handling.

    This is the actual implementation of main(), separated out
    so that main() can wrap it with exception handling.
    """
    signal.signal(signal.SIGTERM, signal_handler)

    args = parse_arguments(argv)
    apply_logging_options(logger, args)
    logger.verbose(f"Running command '{args.command}' with {args.format} output")

    report = build_report(args)
    output_format = FormatRegistry.get(args.format)()
    sys.stdout.write(output_format.render(report))
    return EXIT_CODE.SUCCESS


def main(argv=None):
    """
    Main entry point with comprehensive error handling.

    This function wraps _main_impl() to catch and handle all
    exceptions with user-friendly error messages.
    """
    try:
        return _main_impl(argv)

    except HostProbeException as e:
        logger.error(error_formatter.format_exception(e))
        return EXIT_CODE.FAILURE

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return EXIT_CODE.INTERRUPTED

    except SystemExit:
        raise

    except Exception as e:
        logger.error(format_error('INTERNAL_ERROR', error=str(e)))

        if HOSTPROBE_DEBUG or "--debug" in (argv if argv is not None else sys.argv):
            logger.debug("Stack trace:")
            traceback.print_exc()
        else:
            logger.info("Run with --debug for full stack trace")

        return EXIT_CODE.FAILURE


if __name__ == "__main__":
    sys.exit(main())
