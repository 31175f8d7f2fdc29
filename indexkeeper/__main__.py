"""Module entrypoint for ``python -m indexkeeper``.

All argument parsing and runtime setup happen in ``indexkeeper.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
