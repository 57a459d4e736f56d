"""
PassForge Module Entry Point
=============================

Allows running the CLI via: python -m passforge
"""

from passforge.cli import main

if __name__ == "__main__":
    main()
