"""Allow running the CLI with ``python -m dietician``."""

from .cli import main

if __name__ == '__main__':
    main()
