from __future__ import annotations

import os

import django


os.environ.setdefault("OWM_KEY", "test-key")
os.environ.setdefault("OWM_BASE_URL", "https://owm.test/data/2.5/weather")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherproxy.settings")

django.setup()
