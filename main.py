import sys

from hahen.cli import main


if __name__ == "__main__":
    sys.exit(main())
