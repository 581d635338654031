"""Entry point for `python -m themeswitch`."""

import sys


def main():
    from themeswitch.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
