"""Entrypoint for `python -m oc_nav`."""

from .cli import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
