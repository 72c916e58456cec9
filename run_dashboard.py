#!/usr/bin/env python3
"""
Convenient launcher for the webhooks dashboard.
This script will:
1. Load environment variables from a .env file.
2. Start the dashboard server and open it in the browser.

Install the package first (pip install -e .). Missing store or token
configuration is reported by the dashboard itself with a usage message.
"""

import sys

from dotenv import load_dotenv

from webhooks_dashboard.cli import main as run_cli


def main(argv=None):
    # Load .env file
    load_dotenv()
    return run_cli(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":
    sys.exit(main())
