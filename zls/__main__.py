"""Module entrypoint for ``python -m zls``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing and listing happen in ``zls.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
