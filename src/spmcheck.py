"""spmcheck - Report available updates for Swift packages in an Xcode project.

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from checker import check_for_updates
from cli_config import build_policy_config
from common.logging_utils import configure_logging
from constants import ExitCodes
from repository.git_remote import BranchNotFound, GitCommandError
from versioning.models import UnknownRequirementKind
from xcode.package_resolved import CouldNotFindResolvedFile
from xcode.project import XcodeprojPathMustBeSet

logger = logging.getLogger(__name__)


def run(args):
    """Runs the update check and prints one line per report.

    Args:
        args (argparse.Namespace): Parsed arguments.

    Returns:
        int: Exit code
    """
    config = build_policy_config(args)
    try:
        messages = check_for_updates(args.XCODEPROJ, config)
    except (XcodeprojPathMustBeSet, CouldNotFindResolvedFile, UnknownRequirementKind) as e:
        logger.error("%s", e)
        return ExitCodes.FILE_ERROR.value
    except OSError as e:
        logger.error("Failed to read project: %s", e)
        return ExitCodes.FILE_ERROR.value
    except ValueError as e:
        logger.error("Failed to parse project files: %s", e)
        return ExitCodes.FILE_ERROR.value
    except (GitCommandError, BranchNotFound) as e:
        logger.error("Remote lookup failed: %s", e)
        return ExitCodes.GIT_ERROR.value

    for message in messages:
        sys.stdout.write(message if message.endswith("\n") else message + "\n")

    if messages and args.ERROR_ON_WARNINGS:
        return ExitCodes.EXIT_WARNINGS.value
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE, args.QUIET)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
