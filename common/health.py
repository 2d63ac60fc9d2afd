"""
common.health
~~~~~~~~~~~~~
GET / – liveness probe.

Returns:
    200  {"data": "Server is up and running"}

The payload is fixed; it does not depend on registry state.
"""
from django.http import JsonResponse
from django.views.decorators.http import require_GET

HEALTH_PAYLOAD = {"data": "Server is up and running"}


@require_GET
def health_check(request):
    """Return the fixed service status payload."""
    return JsonResponse(HEALTH_PAYLOAD, status=200)
