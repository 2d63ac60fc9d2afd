"""
apps.applications.registry
~~~~~~~~~~~~~~~~~~~~~~~~~~~
In-memory, insertion-ordered store of :class:`ApplicationConfig` records.

One registry is created per process by
:class:`apps.applications.apps.ApplicationsConfig` and handed to the views;
nothing is persisted.  All reads and writes go through a single lock, so
concurrent requests served by a threaded server never lose an append or
observe a half-updated list.
"""
from __future__ import annotations

import threading
from typing import Iterable

from common.exceptions import DuplicateApplicationError
from .domain import ApplicationConfig, GithubSource, ZipSource

SEED_APPLICATIONS: tuple[ApplicationConfig, ...] = (
    ApplicationConfig(
        name="my-back-end-app",
        description="My nodejs back-end app",
        domain="example.com",
        port=8080,
        platform="NodeJS",
        version="16.x",
        source=GithubSource(
            repo="github.com/username/my-back-end-app",
            branch="main",
        ),
    ),
    ApplicationConfig(
        name="my-front-end-app",
        description="My react front-end app",
        domain="example.com",
        port=80,
        platform="React",
        version="17.x",
        source=ZipSource(zip_file="https://example.com/my-front-end-app.zip"),
    ),
)


class ApplicationRegistry:
    """Append-only list of applications guarded by a mutex."""

    def __init__(self, entries: Iterable[ApplicationConfig] = ()) -> None:
        self._lock = threading.Lock()
        self._entries: list[ApplicationConfig] = list(entries)

    @classmethod
    def seeded(cls) -> "ApplicationRegistry":
        return cls(SEED_APPLICATIONS)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def list(self) -> list[ApplicationConfig]:
        """Return a snapshot of all entries in insertion order."""
        with self._lock:
            return list(self._entries)

    def append(self, entry: ApplicationConfig) -> ApplicationConfig:
        """Add *entry* at the end and return it.  Duplicates are accepted."""
        with self._lock:
            self._entries.append(entry)
        return entry

    def append_unique(self, entry: ApplicationConfig) -> ApplicationConfig:
        """
        Like :meth:`append`, but reject an entry whose name is already taken.

        The name check and the append happen under one lock acquisition.

        Raises:
            DuplicateApplicationError: an entry named ``entry.name`` exists.
        """
        with self._lock:
            if self._find(entry.name) is not None:
                raise DuplicateApplicationError(
                    f"Application '{entry.name}' already exists."
                )
            self._entries.append(entry)
        return entry

    def _find(self, name: str) -> ApplicationConfig | None:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None
