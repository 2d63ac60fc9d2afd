"""
``runserver`` listening on ``settings.PORT`` (8080 unless overridden) when no
address is given on the command line.
"""
from django.conf import settings
from django.contrib.staticfiles.management.commands.runserver import (
    Command as StaticfilesRunserverCommand,
)


class Command(StaticfilesRunserverCommand):
    @property
    def default_port(self):
        return str(settings.PORT)
