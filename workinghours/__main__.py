"""
Convenience entry point for running workinghours directly.

Usage: python -m workinghours [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
