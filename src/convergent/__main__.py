"""Entry point module for executing Convergent as a Python module.

This module enables running Convergent via `python -m convergent`, which
delegates to the CLI main function.
"""

from convergent.cli import main

if __name__ == "__main__":
    main()
