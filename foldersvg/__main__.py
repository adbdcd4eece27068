"""Module entrypoint for ``python -m foldersvg``."""

from .cli import main


if __name__ == "__main__":
    main()
