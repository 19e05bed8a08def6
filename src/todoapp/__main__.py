"""Allow running as ``python -m todoapp``."""

from todoapp.cli.app import main

if __name__ == "__main__":
    main()
