"""Run script.

Why it exists:
- Lets you start the game with `python src/main.py` during development.
- Keeps a plain entrypoint next to the `guess-game` console script.
"""

from __future__ import annotations

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
