"""Module entrypoint for ``python -m lazyfiles``."""

from .cli import main


if __name__ == "__main__":
    main()
