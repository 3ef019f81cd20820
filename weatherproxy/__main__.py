"""Run the proxy: ``python -m weatherproxy`` or ``weather-feel-proxy``."""
from __future__ import annotations

import os

import django
from django.core.management import call_command


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherproxy.settings")
    django.setup()
    call_command("serve")


if __name__ == "__main__":
    main()
