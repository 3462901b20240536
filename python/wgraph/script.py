import argparse
import logging
import sys

from .commands import COMMANDS
from .constants import Constants

class Script():

    def create_parser(self):
        parser = argparse.ArgumentParser(description="Weighted graph toolkit")
        parser.add_argument(
            "--log-level",
            default=Constants.LOG_LEVEL,
            type=str.upper,
            choices=Constants.LOG_LEVELS,
            help="Logging level (default: $WGRAPH_LOG_LEVEL or WARNING)"
        )
        subparsers = parser.add_subparsers(dest="command")

        for command in COMMANDS:
            command.create_parser(subparsers)

        return parser

    def run(self, argv=None) -> int:
        parser = self.create_parser()
        args = parser.parse_args(argv)

        # argparse does not check a default against choices
        if args.log_level.upper() not in Constants.LOG_LEVELS:
            parser.error(f"invalid log level: {args.log_level}")
        args.log_level = args.log_level.upper()

        logging.basicConfig(level=args.log_level, format=Constants.LOG_FORMAT)

        for command_class in COMMANDS:
            if args.command == command_class.name:
                command = command_class()
                command.parse_args(args)
                return command.run()

        parser.print_help()
        return 2


def main():
    script = Script()
    sys.exit(script.run())

if __name__ == "__main__":
    main()
