"""Package entry point for ``python -m emojify``.

WHY: Users can run the converter without the console script installed,
e.g. ``echo ":tada:" | python -m emojify``.

HOW: Delegates to the CLI's main() function.
"""

from emojify.cli import main

if __name__ == "__main__":
    main()
