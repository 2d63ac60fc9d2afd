"""
common.parsers
~~~~~~~~~~~~~~
Request body parsers.
"""
from rest_framework.parsers import JSONParser


class AnyMediaTypeJSONParser(JSONParser):
    """
    Decodes the body as JSON whatever ``Content-Type`` the client sent.

    ``curl -d`` sends ``application/x-www-form-urlencoded`` and some clients
    send ``text/plain`` or nothing at all; the body is still JSON.  A body
    that is not JSON raises :class:`~rest_framework.exceptions.ParseError`.
    """

    media_type = "*/*"
