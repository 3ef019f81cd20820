"""Management command that serves the proxy on its fixed port.

This uses Django's stock threaded WSGI server, which Django does not harden
for production traffic. Deployments behind a WSGI server such as gunicorn or
uWSGI should point it at ``weatherproxy.wsgi:application`` instead.
"""
from __future__ import annotations

from typing import Any

from django.core.management.base import BaseCommand
from django.core.servers.basehttp import run
from django.core.wsgi import get_wsgi_application

from weatherproxy.api.views import get_proxy_config


class Command(BaseCommand):
    help = (
        "Serve the temperature feel proxy with Django's threaded WSGI server, one thread per request. "
        "Use weatherproxy.wsgi:application with a production WSGI server."
    )

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        port = get_proxy_config().port
        self.stdout.write(f"Listening on :{port}")
        run("0.0.0.0", port, get_wsgi_application(), threading=True)
