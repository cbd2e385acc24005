"""Argument parsing functionality for spmcheck."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="spmcheck",
        description=(
            "spmcheck - Report newer versions of Swift packages used by an Xcode project"
        ),
        add_help=True,
    )

    parser.add_argument("-p", "--xcodeproj",
                        dest="XCODEPROJ",
                        help="Path to the .xcodeproj to check",
                        action="store", type=str,
                        required=True)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a YAML config file (default: .spmcheck.yml if present)",
                        action="store",
                        type=str)

    parser.add_argument("--check-when-exact",
                        dest="CHECK_WHEN_EXACT",
                        help="Also report newer versions for exact-version requirements.",
                        action="store_true",
                        default=None)
    parser.add_argument("--report-above-maximum",
                        dest="REPORT_ABOVE_MAXIMUM",
                        help="Report the newest version even when it is beyond the configured bound.",
                        action="store_true",
                        default=None)
    parser.add_argument("--report-pre-releases",
                        dest="REPORT_PRE_RELEASES",
                        help="Consider pre-release versions as update candidates.",
                        action="store_true",
                        default=None)
    parser.add_argument("-i", "--ignore-repo",
                        dest="IGNORE_REPOS",
                        help="Repository URL to skip entirely (repeatable)",
                        action="append", type=str,
                        default=[])

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='WARNING')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("--error-on-warnings",
                        dest="ERROR_ON_WARNINGS",
                        help="Exit with a non-zero status code if updates are reported.",
                        action="store_true")
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output logs to the console.",
                        action="store_true")

    return parser.parse_args(argv)
