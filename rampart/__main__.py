"""
Rampart Module Entry Point
===========================

Allows running the Rampart CLI via: python -m rampart
"""

from rampart.cli import main

if __name__ == "__main__":
    main()
