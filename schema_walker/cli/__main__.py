"""Module entrypoint for `python -m schema_walker.cli`.

Delegates to the checker CLI implementation.
"""

from .check import main


if __name__ == "__main__":
    main()
