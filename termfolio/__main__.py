"""Allow `python -m termfolio`."""

from termfolio.cli import main

if __name__ == "__main__":
    main()
