"""Content-addressed publication of grammar documents."""

from __future__ import annotations

import hashlib
import logging
import re

from ttl_grammar.constants import (
    GRAMMAR_FILE_PREFIX,
    GRAMMAR_FILE_SUFFIX,
    GRAMMAR_SCOPE_NAME,
    NOTIFICATION_SOURCE,
)
from ttl_grammar.errors import (
    FileSystemError,
    GrammarError,
    PublishError,
    RegistrationError,
)
from ttl_grammar.interfaces.filesystem import IFileSystem
from ttl_grammar.interfaces.notifier import INotifier
from ttl_grammar.interfaces.registry import IGrammarRegistry
from ttl_grammar.models import CacheEntry

logger = logging.getLogger(__name__)


def content_digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


class ContentAddressStore:
    """Keep exactly one registered grammar file per distinct document text.

    ``publish`` is not reentrant; callers must serialise it.
    """

    def __init__(
        self,
        filesystem: IFileSystem,
        registry: IGrammarRegistry,
        notifier: INotifier,
        scope_name: str = GRAMMAR_SCOPE_NAME,
        file_prefix: str = GRAMMAR_FILE_PREFIX,
        notification_source: str = NOTIFICATION_SOURCE,
    ) -> None:
        self.filesystem = filesystem
        self.registry = registry
        self.notifier = notifier
        self.scope_name = scope_name
        self.file_prefix = file_prefix
        self.notification_source = notification_source
        self._generated_re = re.compile(
            rf"^{re.escape(file_prefix)}-[0-9a-f]{{64}}{re.escape(GRAMMAR_FILE_SUFFIX)}$"
        )

    def filename_for(self, digest: str) -> str:
        return f"{self.file_prefix}-{digest}{GRAMMAR_FILE_SUFFIX}"

    def entry_for(self, text: str) -> CacheEntry:
        digest = content_digest(text)
        filename = self.filename_for(digest)
        return CacheEntry(
            digest=digest,
            filename=filename,
            path=self.filesystem.resolve(filename),
        )

    def is_generated(self, filename: str) -> bool:
        return self._generated_re.match(filename) is not None

    async def publish(self, text: str) -> str:
        entry = self.entry_for(text)
        try:
            if await self.filesystem.exists(entry.filename):
                logger.debug("Grammar %s already published", entry.filename)
                return entry.filename
            await self._replace(entry, text)
        except GrammarError as exc:
            self._report(exc)
            raise
        except OSError as exc:
            error = FileSystemError(
                entry.path, f"Unable to access grammar files ({exc})"
            )
            self._report(error)
            raise error from exc
        except Exception as exc:
            error = PublishError(entry.path, f"Unable to publish grammar ({exc})")
            self._report(error)
            raise error from exc

        self.notifier.info(
            self.notification_source, f"Grammar created at \n{entry.path}"
        )
        return entry.filename

    async def _replace(self, entry: CacheEntry, text: str) -> None:
        try:
            await self.registry.remove_for_scope(self.scope_name)
        except Exception as exc:
            raise RegistrationError(
                entry.path, f"Unable to remove grammar {self.scope_name} ({exc})"
            ) from exc

        await self.remove_generated_files()
        await self.filesystem.write_text(entry.filename, text)
        logger.debug("Wrote grammar %s", entry.path)

        try:
            await self.registry.load(entry.path)
        except Exception as exc:
            # An unregistered file would turn the next publish of the same
            # text into a no-op.
            await self._discard(entry)
            raise RegistrationError(
                entry.path, "Unable to add Grammar to registry"
            ) from exc

    async def remove_generated_files(self) -> list[str]:
        removed: list[str] = []
        for name in await self.filesystem.list_names():
            if not self.is_generated(name):
                continue
            await self.filesystem.delete(name)
            removed.append(name)
        if removed:
            logger.debug("Removed stale grammars: %s", ", ".join(removed))
        return removed

    async def _discard(self, entry: CacheEntry) -> None:
        try:
            await self.filesystem.delete(entry.filename)
        except (GrammarError, OSError) as exc:
            logger.warning("Unable to discard unregistered grammar: %s", exc)

    def _report(self, exc: GrammarError) -> None:
        self.notifier.warning(self.notification_source, str(exc))
        exc.reported = True
