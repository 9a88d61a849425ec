"""Keep the tagged-template grammar in sync with the configured rules."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ttl_grammar.grammar.builder import GrammarDocumentBuilder
from ttl_grammar.interfaces.filesystem import IFileSystem
from ttl_grammar.interfaces.notifier import INotifier
from ttl_grammar.interfaces.registry import IGrammarRegistry
from ttl_grammar.interfaces.rule_source import IRuleSource
from ttl_grammar.interfaces.validator import IRegexValidator
from ttl_grammar.models import Disposable
from ttl_grammar.patterns.compiler import PatternCompiler
from ttl_grammar.scheduler import DebounceScheduler
from ttl_grammar.settings import GrammarSettings
from ttl_grammar.store import ContentAddressStore

logger = logging.getLogger(__name__)


class TaggedTemplateGrammarService:
    def __init__(
        self,
        rule_source: IRuleSource,
        filesystem: IFileSystem,
        registry: IGrammarRegistry,
        notifier: INotifier,
        validator: Optional[IRegexValidator] = None,
        settings: Optional[GrammarSettings] = None,
    ) -> None:
        self.settings = settings or GrammarSettings()
        self.rule_source = rule_source
        self.notifier = notifier
        self.builder = GrammarDocumentBuilder(
            compiler=PatternCompiler(validator),
            scope_name=self.settings.scope_name,
        )
        self.store = ContentAddressStore(
            filesystem=filesystem,
            registry=registry,
            notifier=notifier,
            scope_name=self.settings.scope_name,
            file_prefix=self.settings.file_prefix,
            notification_source=self.settings.notification_source,
        )
        self.scheduler: DebounceScheduler[tuple[str, ...]] = DebounceScheduler(
            self.rebuild,
            notifier,
            notification_source=self.settings.notification_source,
        )
        self._subscription: Optional[Disposable] = None

    @property
    def started(self) -> bool:
        return self._subscription is not None

    def start(self) -> Disposable:
        if self._subscription is not None:
            raise RuntimeError("Grammar service already started")
        self._subscription = self.rule_source.observe(self.on_config_changed)
        self.on_config_changed()
        return self._subscription

    def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        self.scheduler.cancel()

    def on_config_changed(self) -> None:
        try:
            rule_specs = tuple(self.rule_source.rule_specs())
        except Exception as exc:
            logger.warning("Unable to read grammar rules: %s", exc)
            self.notifier.warning(self.settings.notification_source, str(exc))
            return
        self.scheduler.schedule(rule_specs, self.settings.quiet_period)

    async def rebuild(self, rule_specs: Sequence[str]) -> str:
        text = self.builder.build(rule_specs)
        return await self.store.publish(text)

    async def wait_idle(self) -> None:
        await self.scheduler.wait_idle()
