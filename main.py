import sys

from dragon_flight.game import main


if __name__ == "__main__":
    sys.exit(main())
