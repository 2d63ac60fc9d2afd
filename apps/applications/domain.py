"""
apps.applications.domain
~~~~~~~~~~~~~~~~~~~~~~~~~
Application configuration records and their code source variants.

No Django view, serializer, or ORM code lives here.  Parsing reports
problems through :mod:`common.exceptions` so the API layer can render them
directly.

Public API
----------
CodeSource              – discriminant enum (``github`` / ``zip``)
GithubSource, ZipSource – the two code source variants
parse_source(raw)       – build a variant from decoded JSON
ApplicationConfig       – a registrable application record
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union

from common.exceptions import (
    ApplicationValidationError,
    InvalidSourceFormatError,
    MalformedBodyError,
)

#: Key carrying the source discriminant on the wire.
KIND_KEY = "kind"

MIN_PORT = 1
MAX_PORT = 65535


class CodeSource(str, enum.Enum):
    """Where an application's code comes from."""

    GITHUB = "github"
    ZIP = "zip"


@dataclass(frozen=True)
class GithubSource:
    """Code pulled from a repository branch, e.g. ``github.com/me/app@main``."""

    repo: str
    branch: str

    def source_kind(self) -> CodeSource:
        return CodeSource.GITHUB

    def to_dict(self) -> dict:
        return {KIND_KEY: CodeSource.GITHUB.value, "repo": self.repo, "branch": self.branch}


@dataclass(frozen=True)
class ZipSource:
    """Code downloaded as an archive, e.g. ``https://example.com/app.zip``."""

    zip_file: str

    def source_kind(self) -> CodeSource:
        return CodeSource.ZIP

    def to_dict(self) -> dict:
        return {KIND_KEY: CodeSource.ZIP.value, "zip_file": self.zip_file}


CodeSourceInfo = Union[GithubSource, ZipSource]

#: variant -> (class, wire fields)
_VARIANTS: dict[CodeSource, tuple[type, tuple[str, ...]]] = {
    CodeSource.GITHUB: (GithubSource, ("repo", "branch")),
    CodeSource.ZIP: (ZipSource, ("zip_file",)),
}


def _infer_kind(raw: dict) -> CodeSource:
    """Pick the variant whose fields appear in *raw*; exactly one must match."""
    matches = [
        kind
        for kind, (_, fields) in _VARIANTS.items()
        if any(name in raw for name in fields)
    ]
    if not matches:
        raise InvalidSourceFormatError(
            'source must contain either "repo" and "branch" or "zip_file"'
        )
    if len(matches) > 1:
        raise InvalidSourceFormatError(
            'source mixes fields of several variants; set "kind" explicitly'
        )
    return matches[0]


def parse_source(raw: object) -> CodeSourceInfo:
    """
    Build a code source variant from decoded JSON.

    An explicit ``kind`` selects the variant.  Without it the variant is
    inferred from the fields present, which keeps bodies written for the
    older, discriminant-less wire format working.

    Raises:
        InvalidSourceFormatError: *raw* is not an object, names an unknown
            ``kind``, matches no variant, or carries non-string values.
    """
    if not isinstance(raw, dict):
        raise InvalidSourceFormatError("source must be a JSON object")

    if KIND_KEY in raw:
        try:
            kind = CodeSource(raw[KIND_KEY])
        except (ValueError, TypeError):
            allowed = ", ".join(k.value for k in CodeSource)
            raise InvalidSourceFormatError(
                f'unknown source kind {raw[KIND_KEY]!r}; expected one of: {allowed}'
            ) from None
    else:
        kind = _infer_kind(raw)

    cls, fields = _VARIANTS[kind]
    values = {}
    for name in fields:
        value = raw.get(name)
        if not isinstance(value, str):
            raise InvalidSourceFormatError(
                f'"{name}" must be a string for a {kind.value} source'
            )
        values[name] = value
    return cls(**values)


# ---------------------------------------------------------------------------
# ApplicationConfig
# ---------------------------------------------------------------------------

_TEXT_FIELDS: tuple[str, ...] = ("name", "description", "domain", "platform", "version")


@dataclass(frozen=True)
class ApplicationConfig:
    """
    Configuration of one registered cloud application.

    ``name`` acts as the identifier in practice but nothing enforces it
    unless the registry is asked to (see ``APPLICATIONS_UNIQUE_NAMES``).
    """

    name: str
    description: str
    domain: str
    port: int
    platform: str
    version: str
    source: CodeSourceInfo

    @classmethod
    def from_dict(cls, raw: object) -> "ApplicationConfig":
        """
        Structural parse of a decoded JSON body.

        Absent (or ``null``) text fields become ``""`` and an absent port
        becomes ``0``; :meth:`validate` is what reports them.  Fields of the
        wrong JSON type are collected and reported together.  Unknown keys
        are ignored.

        Raises:
            MalformedBodyError: *raw* is not an object or has mistyped fields.
            InvalidSourceFormatError: ``source`` is absent or unrecognised.
        """
        if not isinstance(raw, dict):
            raise MalformedBodyError("body must be a JSON object")

        problems: list[str] = []
        values: dict = {}

        for name in _TEXT_FIELDS:
            value = raw.get(name)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                problems.append(f'"{name}" must be a string')
            values[name] = value

        port = raw.get("port")
        if port is None:
            port = 0
        elif isinstance(port, bool) or not isinstance(port, int):
            problems.append('"port" must be an integer')
        values["port"] = port

        if problems:
            raise MalformedBodyError("; ".join(problems))

        if raw.get("source") is None:
            raise InvalidSourceFormatError('"source" is required')

        return cls(source=parse_source(raw["source"]), **values)

    def to_dict(self) -> dict:
        data = {name: getattr(self, name) for name in _TEXT_FIELDS}
        data["port"] = self.port
        data["source"] = self.source.to_dict()
        return data

    def validate(self) -> list[dict]:
        """
        Return every missing or invalid field as ``{"field", "message"}``.

        An empty list means the record is complete.  Only presence and range
        are checked; domains, repositories and archive URLs are not resolved.
        """
        errors: list[dict] = []

        for name in _TEXT_FIELDS:
            if not getattr(self, name).strip():
                errors.append({"field": name, "message": f'"{name}" is required.'})

        if not MIN_PORT <= self.port <= MAX_PORT:
            errors.append({
                "field": "port",
                "message": f'"port" must be between {MIN_PORT} and {MAX_PORT}.',
            })

        for key, value in self.source.to_dict().items():
            if key != KIND_KEY and not value.strip():
                errors.append({
                    "field": f"source.{key}",
                    "message": f'"{key}" is required for a {self.source.source_kind().value} source.',
                })

        return errors

    def ensure_valid(self) -> None:
        """Raise :class:`ApplicationValidationError` if :meth:`validate` finds anything."""
        errors = self.validate()
        if errors:
            raise ApplicationValidationError(errors)
