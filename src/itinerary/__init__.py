# SPDX-License-Identifier: MIT

from itinerary.cleanup import register_cleanup
from itinerary.initialize import initialize
from itinerary.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
