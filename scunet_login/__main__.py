"""
Main entry point for the scunet_login package.

Allows running the client as: python -m scunet_login
"""

import sys

from scunet_login.cli import main

if __name__ == "__main__":
    sys.exit(main())
