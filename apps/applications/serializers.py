"""
apps.applications.serializers
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
I/O-only serializers for the Applications API.
Shape validation only; the record itself is built and checked by
:mod:`apps.applications.domain`.
"""
from django.conf import settings
from drf_spectacular.utils import PolymorphicProxySerializer, extend_schema_field
from rest_framework import serializers

from common.exceptions import InvalidSourceFormatError
from .domain import MAX_PORT, MIN_PORT, CodeSource, parse_source


# ---------------------------------------------------------------------------
# Strict JSON scalar fields
# ---------------------------------------------------------------------------

class StrictCharField(serializers.CharField):
    """CharField that refuses numbers and booleans instead of stringifying them."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictIntegerField(serializers.IntegerField):
    """IntegerField that refuses booleans, floats and numeric strings."""

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, int):
            self.fail("invalid")
        return super().to_internal_value(data)


# ---------------------------------------------------------------------------
# Code source variants
# ---------------------------------------------------------------------------

class GithubSourceSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=[CodeSource.GITHUB.value], required=False)
    repo = serializers.CharField(help_text='e.g. "github.com/username/my-app"')
    branch = serializers.CharField(help_text='e.g. "main"')


class ZipSourceSerializer(serializers.Serializer):
    kind = serializers.ChoiceField(choices=[CodeSource.ZIP.value], required=False)
    zip_file = serializers.CharField(help_text='e.g. "https://example.com/my-app.zip"')


@extend_schema_field(
    PolymorphicProxySerializer(
        component_name="CodeSourceInfo",
        serializers={
            CodeSource.GITHUB.value: GithubSourceSerializer,
            CodeSource.ZIP.value: ZipSourceSerializer,
        },
        resource_type_field_name="kind",
    )
)
class CodeSourceField(serializers.Field):
    """
    A code source variant with its ``kind`` discriminant.

    Input is checked with :func:`~apps.applications.domain.parse_source` and
    normalised to the explicit-``kind`` wire form.
    """

    default_error_messages = {
        "invalid_source_format": "{detail}",
    }

    def to_representation(self, value):
        return value.to_dict()

    def to_internal_value(self, data):
        try:
            return parse_source(data).to_dict()
        except InvalidSourceFormatError as exc:
            self.fail("invalid_source_format", detail=exc.error)


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

_HELP_TEXTS = {
    "name": 'e.g. "my-app"',
    "description": 'e.g. "My awesome app"',
    "domain": 'e.g. "example.com"',
    "platform": 'e.g. "NodeJS", "Go", "Python"',
    "version": 'e.g. "16.x", "1.x", "3.x"',
}


class ApplicationConfigCreateSerializer(serializers.Serializer):
    """
    Validates POST /applications request body.

    Fields are built per instance from ``APPLICATIONS_STRICT_VALIDATION``:
    strict mode requires every field non-blank and a port in range; lenient
    mode lets text fields and the port be absent, blank or ``null``.  The
    ``source`` is required in both modes.
    """

    def get_fields(self):
        if settings.APPLICATIONS_STRICT_VALIDATION:
            text_kwargs = {}
            port_kwargs = {"min_value": MIN_PORT, "max_value": MAX_PORT}
        else:
            text_kwargs = {"required": False, "allow_blank": True, "allow_null": True, "default": ""}
            port_kwargs = {"required": False, "allow_null": True, "default": 0}

        fields = {
            name: StrictCharField(trim_whitespace=False, help_text=help_text, **text_kwargs)
            for name, help_text in _HELP_TEXTS.items()
        }
        fields["port"] = StrictIntegerField(help_text="e.g. 8080, 80", **port_kwargs)
        fields["source"] = CodeSourceField()
        return fields


class ApplicationConfigSerializer(serializers.Serializer):
    """Read serializer for a stored application."""

    name = serializers.CharField(help_text=_HELP_TEXTS["name"])
    description = serializers.CharField(help_text=_HELP_TEXTS["description"])
    domain = serializers.CharField(help_text=_HELP_TEXTS["domain"])
    port = serializers.IntegerField(help_text="e.g. 8080, 80")
    platform = serializers.CharField(help_text=_HELP_TEXTS["platform"])
    version = serializers.CharField(help_text=_HELP_TEXTS["version"])
    source = CodeSourceField()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ErrorResponseSerializer(serializers.Serializer):
    """Error envelope returned for every rejected request."""

    name = serializers.CharField()
    message = serializers.CharField()
    error = serializers.CharField()
    invalid_fields = serializers.ListField(child=serializers.DictField(), required=False)
