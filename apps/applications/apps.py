"""
apps.applications.apps
"""
from django.apps import AppConfig


class ApplicationsConfig(AppConfig):
    """
    Owns the process-wide :class:`ApplicationRegistry`.

    The registry is created once the app registry is ready and lives for the
    lifetime of the process.  Views reach it through :func:`get_registry`.
    """

    name = "apps.applications"
    label = "applications"
    verbose_name = "Applications"

    registry = None

    def ready(self):
        from .registry import ApplicationRegistry

        self.registry = ApplicationRegistry.seeded()


def get_registry():
    """Return the registry owned by the installed ``applications`` app."""
    from django.apps import apps

    return apps.get_app_config(ApplicationsConfig.label).registry
