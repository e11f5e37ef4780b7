"""Runs the catlang interpreter on a .cat file, or in command-line mode. Also uses the error handling context manager.
Called from the catlang console script.
"""

import argparse

from catlang.lang.error import ErrorHandler
from catlang.lang.session import Session
from catlang.lang.shell import Shell


def main(argv=None):
    """Runs catlang interpreter."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="catlang", description="Interpreter for the cat language.")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        args = parser.parse_args(argv)

        if args.file is not None:
            sess = Session(error_handler, args.file, cmd_line=False)
            for val in sess.run():
                print(val)

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
