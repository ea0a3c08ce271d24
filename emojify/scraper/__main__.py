"""Package entry point for ``python -m emojify.scraper``."""

from emojify.scraper.cli import main

if __name__ == "__main__":
    main()
