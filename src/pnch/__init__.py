# SPDX-License-Identifier: MIT

import sys

from pnch.error import PnchError
from pnch.initialize import initialize
from pnch.terminal.app import run
from pnch.terminal.error import print_error


def main() -> None:
    try:
        initialize()
    except PnchError as e:
        print_error(e)
        sys.exit(1)
    run()


if __name__ == "__main__":
    main()
