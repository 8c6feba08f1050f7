"""Module entry point for ``python -m querybench``."""

from __future__ import annotations


def main() -> None:
    from .cli import app

    app(prog_name="querybench")


if __name__ == "__main__":
    main()
