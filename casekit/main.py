import sys

from .core import Application


def main():
    with Application(*sys.argv[1:]) as app:
        app.run_service()


if __name__ == "__main__":
    main()
