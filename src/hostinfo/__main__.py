"""Allow ``python -m hostinfo``."""

from hostinfo.app import main

if __name__ == "__main__":
    main()
