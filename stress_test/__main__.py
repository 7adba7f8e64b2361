"""Module entry point for `python -m stress_test`."""

from stress_test.cli import main

if __name__ == "__main__":  # pragma: no cover
    main()
