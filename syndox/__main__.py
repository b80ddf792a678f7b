"""Allow ``python -m syndox``."""

from syndox.cli import main

if __name__ == "__main__":
    main()
