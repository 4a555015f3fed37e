"""nk_message — compose a monitoring message as XML, or purge old message files."""

import logging
import sys
from argparse import ArgumentParser, ArgumentTypeError, RawDescriptionHelpFormatter
from datetime import datetime

from nk_message import PROGRAM_NAME, __version__
from nk_message.config import Config, load_config
from nk_message.formatter import compact_timestamp, complete_record, render_xml
from nk_message.models import MessageRecord, PurgeRequest
from nk_message.output import build_filename, write_message, write_stdout
from nk_message.purger import purge_message_files
from nk_message.status import STATUS_TABLE

LOG_FORMAT = f"%(asctime)s [{PROGRAM_NAME}] %(levelname)s %(message)s"


class MessageArgumentParser(ArgumentParser):
    """Reports bad arguments with the full usage text and exit status 1.

    Like getopt, an option that takes a value consumes the next word even
    when it starts with "-" (``-m -x`` sets the text to "-x").
    """

    def error(self, message):
        self.print_help(sys.stderr)
        self.exit(1, f"\n{self.prog}: error: {message}\n")

    def _value_options(self) -> set[str]:
        return {
            option
            for action in self._actions
            if action.option_strings and action.nargs is None
            for option in action.option_strings
        }

    def _attach_dash_values(self, args: list[str]) -> list[str]:
        value_options = self._value_options()
        attached = []
        i = 0
        while i < len(args):
            arg = args[i]
            if arg in value_options and i + 1 < len(args) and args[i + 1].startswith("-"):
                # "-m" "-x" → "-m-x", which argparse reads as -m with value "-x"
                attached.append(arg + args[i + 1])
                i += 2
                continue
            attached.append(arg)
            i += 1
        return attached

    def parse_known_args(self, args=None, namespace=None):
        args = sys.argv[1:] if args is None else list(args)
        return super().parse_known_args(self._attach_dash_values(args), namespace)


def about() -> str:
    return (
        f"{PROGRAM_NAME}, version {__version__}\n"
        "(c) Copyright 2013-2015 Daniel Ruus, IT-enheten"
    )


def _status_epilog() -> str:
    lines = [
        "STATUS LEVEL:",
        "Code  Name                Meaning (colour in web interface)",
    ]
    for code, names, meaning in STATUS_TABLE:
        lines.append(f"  {code}   {names:<20}{meaning}")
    return "\n".join(lines)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid age '{value}': must be a whole number of days")
    if number < 0:
        raise ArgumentTypeError(f"invalid age '{value}': must not be negative")
    return number


def build_parser(config: Config | None = None) -> MessageArgumentParser:
    """Build the CLI argument parser. Defaults come from config."""
    config = config or Config()
    parser = MessageArgumentParser(
        prog=PROGRAM_NAME,
        description=f"{about()}\nCompose a monitoring message as XML, or purge old message files.",
        epilog=_status_epilog(),
        formatter_class=RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", action="help", help="Show this message")
    parser.add_argument(
        "-l", dest="level", default="", metavar="LEVEL",
        help="Status level (info|information|warn|warning|crit|critical|test|success|successful)",
    )
    parser.add_argument("-s", dest="subject", default="", metavar="SUBJECT",
                        help="Subject of message")
    parser.add_argument("-m", dest="text", default="", metavar="TEXT",
                        help="Message text")
    parser.add_argument("-a", dest="app", default=config.app_name, metavar="APP",
                        help=f"Application name (default: {config.app_name})")
    parser.add_argument("-c", dest="host", default="", metavar="HOST",
                        help="Client host name (overrides the local host name)")
    parser.add_argument("-u", dest="user", default="", metavar="USER",
                        help="Name of user creating the message")
    parser.add_argument("-P", dest="purge", action="store_true",
                        help="Purge old message files (override the age with -A)")
    parser.add_argument(
        "-A", dest="age", type=_non_negative_int, default=config.purge_max_age_days,
        metavar="DAYS",
        help=f"Files older than DAYS are deleted with -P (default: {config.purge_max_age_days})",
    )
    parser.add_argument("-p", dest="path", default=config.purge_dir, metavar="PATH",
                        help=f"Directory checked for old message files (default: {config.purge_dir})")
    parser.add_argument("-n", dest="dry_run", action="store_true",
                        help="With -P, only report which files would be deleted")
    parser.add_argument("-o", dest="output", metavar="FILE",
                        help="Write the message to FILE (wins over -O)")
    parser.add_argument("-O", dest="auto_output", action="store_true",
                        help="Write the message to message-<host>-<YYYYMMDDHHMMSS>.xml")
    parser.add_argument("-D", dest="print_timestamp", action="store_true",
                        help="Print out a timestamp in the format YYYYMMDDHHMMSS")
    parser.add_argument("-v", dest="verbose", action="store_true", help="Verbose")
    parser.add_argument("-V", action="version", version=about(),
                        help="Show the program version")
    return parser


def run_purge(request: PurgeRequest) -> int:
    """Purge the directory and print the per-file report. Returns an exit status."""
    try:
        report = purge_message_files(
            request.directory, request.max_age_days, dry_run=request.dry_run
        )
    except OSError as e:
        print(f"Error: Couldn't open the directory '{request.directory}': {e}", file=sys.stderr)
        return 1

    verb = "Would remove" if report.dry_run else "Removed"
    lines = [f"{verb}: {name}" for name in report.removed]
    lines.extend(f"Kept: {name}" for name in report.kept)

    summary = (
        f"{'Would purge' if report.dry_run else 'Purged'} {len(report.removed)} of "
        f"{report.matched} message file(s) older than {report.max_age_days} day(s) "
        f"in '{report.directory}'"
    )
    if report.errors:
        summary += f", {len(report.errors)} error(s)"
    lines.append(summary)
    write_stdout("\n".join(lines) + "\n")
    return 0


def run_message(args, config: Config, now: datetime) -> int:
    """Compose the message and send it to stdout or a file. Returns an exit status."""
    record = MessageRecord(
        host=args.host,
        user=args.user,
        subject=args.subject,
        text=args.text,
        status=args.level,
        app=args.app,
    )
    completed = complete_record(record, now=now)
    xml_text = render_xml(completed, escape_xml=config.escape_xml)

    if args.output:
        path = args.output
    elif args.auto_output:
        path = build_filename(completed.host, compact_timestamp(now))
    else:
        write_stdout(xml_text)
        return 0

    try:
        write_message(path, xml_text)
    except OSError as e:
        print(f"Error: Cannot write message file '{path}': {e}", file=sys.stderr)
        return 1

    if not args.output:
        write_stdout(path + "\n")
    return 0


def run(args, config: Config, now: datetime | None = None) -> int:
    """Dispatch parsed arguments: timestamp, purge, or message composition."""
    now = now or datetime.now()

    if args.print_timestamp:
        print(compact_timestamp(now))
        return 0

    if args.purge:
        return run_purge(PurgeRequest(args.path, args.age, args.dry_run))

    return run_message(args, config, now)


def _run_cli(argv: list[str]) -> int:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)
    config = load_config()
    parser = build_parser(config)

    if not argv:
        parser.print_help(sys.stderr)
        return 1

    args = parser.parse_args(argv)
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)
    return run(args, config)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        return _run_cli(argv)
    except KeyboardInterrupt:
        return 0
    except BrokenPipeError:
        return 0
