#!/usr/bin/env python
"""Django command-line utility (migrations for the feed status table, admin)."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Seller Center credentials and DATABASE_URL may live in a .env next to this file
load_dotenv(Path(__file__).resolve().parent / ".env")

from django.core.management import execute_from_command_line


def main() -> None:
    """Run administrative tasks."""
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "core.settings.development")
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
