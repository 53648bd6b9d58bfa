# pylint: disable=import-outside-toplevel
"""Main entry point for the anatomy CLI.

This module provides the command-line interface for the anatomy explorer,
allowing operators to bootstrap the database, seed demo accounts and drive
the persisted demo session from a terminal.
"""

import argparse
import sys

from dotenv import load_dotenv

load_dotenv()

HELP_TEXT = """
anatomy - Subscription-based anatomy explorer.

Usage:
    python -m anatomy <command>

Commands:
    migrate   Bootstrap / migrate the database schema
    seed      Create the demo server accounts and sample comments
    login     Log in to the demo session (EMAIL PASSWORD)
    logout    Clear the demo session
    whoami    Show the demo session identity and subscription flags
    help      Show this help and usage documentation

The demo session is stored in the database, so it survives restarts:
    python -m anatomy login premium@example.com secret
    python -m anatomy whoami
"""


def main(argv=None) -> int:
    """Main function for the anatomy CLI."""
    parser = argparse.ArgumentParser(prog="anatomy", description="anatomy CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser(
        "migrate",
        help="Bootstrap / migrate the database schema (safe to run on every start)",
    )
    subparsers.add_parser("seed", help="Create the demo server accounts and sample comments")

    login_parser = subparsers.add_parser("login", help="Log in to the demo session")
    login_parser.add_argument("email", type=str)
    login_parser.add_argument("password", type=str)

    subparsers.add_parser("logout", help="Clear the demo session")
    subparsers.add_parser("whoami", help="Show the demo session identity")
    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    if args.command == "migrate":
        from anatomy.commands.migrate import run

        run()
    elif args.command == "seed":
        from anatomy.commands.seed import run

        run()
    elif args.command == "login":
        from anatomy.commands.session import login

        return login(args.email, args.password)
    elif args.command == "logout":
        from anatomy.commands.session import logout

        return logout()
    elif args.command == "whoami":
        from anatomy.commands.session import whoami

        return whoami()
    else:
        print(HELP_TEXT)
    return 0


if __name__ == "__main__":
    sys.exit(main())
