"""
apps.applications.services
~~~~~~~~~~~~~~~~~~~~~~~~~~~
All business logic for the Applications API.

Views must call only these functions.  Each function takes the registry it
operates on explicitly; views obtain it from the app config.

Behaviour switches (see ``config.settings.base``):

- ``APPLICATIONS_STRICT_VALIDATION`` – when true, a structurally valid body
  with missing or empty required fields is rejected instead of stored.
- ``APPLICATIONS_UNIQUE_NAMES`` – when true, registering a name that is
  already present fails with a conflict.
"""
from __future__ import annotations

import structlog
from django.conf import settings

from .domain import ApplicationConfig
from .registry import ApplicationRegistry

logger = structlog.get_logger(__name__)


def list_applications(registry: ApplicationRegistry) -> list[ApplicationConfig]:
    """Return every registered application in registration order."""
    return registry.list()


def register_application(registry: ApplicationRegistry, payload: object) -> ApplicationConfig:
    """
    Parse *payload* into an :class:`ApplicationConfig` and append it.

    Args:
        registry: Store receiving the new entry.
        payload: Decoded JSON body, usually already shape-checked by
            :class:`~apps.applications.serializers.ApplicationConfigCreateSerializer`.

    Returns:
        The stored entry.

    Raises:
        MalformedBodyError: *payload* has the wrong shape.
        InvalidSourceFormatError: ``source`` matches no known variant.
        ApplicationValidationError: strict validation is on and required
            fields are missing.
        DuplicateApplicationError: unique names are on and the name is taken.
    """
    application = ApplicationConfig.from_dict(payload)
    if settings.APPLICATIONS_STRICT_VALIDATION:
        application.ensure_valid()

    if settings.APPLICATIONS_UNIQUE_NAMES:
        stored = registry.append_unique(application)
    else:
        stored = registry.append(application)

    logger.info(
        "application_registered",
        name=stored.name,
        source_kind=stored.source.source_kind().value,
        total=len(registry),
    )
    return stored
