"""
WSGI config for donorlink project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'donorlink.settings')

application = get_wsgi_application()
