import argparse
import sys
from dataclasses import replace

from . import __version__
from .config import LOG_LEVELS, ReportSettings, load_settings
from .differ import compare
from .exceptions import AttributeDiffError, ConfigError, UsageError
from .extractor import extract_attributes
from .logging_config import get_logger, setup_logging
from .report import print_report

log = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def validate_xml_path(path):
    """Checks that a path ends with ".xml" and returns it unchanged."""
    if not path.endswith(".xml"):
        raise UsageError(f"[{path}] is not an xml file")
    return path


def _xml_path_argument(value):
    try:
        return validate_xml_path(value)
    except UsageError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser():
    parser = argparse.ArgumentParser(
        prog="xml-attribute-diff",
        description="Compare attribute values of two xml files.",
    )
    parser.add_argument("file1", type=_xml_path_argument,
                        help="Original xml file, used as a reference for the comparison.")
    parser.add_argument("file2", type=_xml_path_argument,
                        help="xml file to compare to the original file.")
    parser.add_argument("--config", metavar="PATH",
                        help="Optional config.ini with [Report] and [Logging] sections.")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS,
                        help="Logging level, overrides the configured one.")
    parser.add_argument("--no-labels", action="store_true",
                        help="Refer to the documents as file1 and file2 instead of their paths.")
    parser.add_argument("--unsorted", action="store_true",
                        help="Print new and missing values in set order instead of sorted.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _resolve_report_settings(settings: ReportSettings, args) -> ReportSettings:
    if args.no_labels:
        settings = replace(settings, include_labels=False)
    if args.unsorted:
        settings = replace(settings, sort_values=False)
    return settings


def run(file1, file2, settings=None, stream=None):
    """
    Extracts the attribute values of both documents and prints the comparison.

    Both documents are fully extracted before anything is printed, so a failure
    on either one produces no output.

    Raises:
        ReadError: If either document cannot be read.
        ParseError: If either document is malformed.
    """
    reference = extract_attributes(file1)
    candidate = extract_attributes(file2)
    log.info(f"{file1}: {len(reference)} unique values, {file2}: {len(candidate)} unique values")

    report = compare(reference, candidate)
    print_report(report, file1, file2, settings=settings, stream=stream)
    return report


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_USAGE

    setup_logging(args.log_level or settings.log_level)
    log.debug(f"Comparing reference [{args.file1}] with candidate [{args.file2}]")

    try:
        run(args.file1, args.file2, settings=_resolve_report_settings(settings.report, args))
    except AttributeDiffError as e:
        log.debug("Comparison aborted", exc_info=True)
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
