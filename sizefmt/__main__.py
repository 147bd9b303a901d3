"""
Run the sizefmt CLI via `python -m sizefmt`.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys

# Local ----------------------------------------------------------------------------------------------------------------
from sizefmt.cli import main

if __name__ == "__main__":
    sys.exit(main())
