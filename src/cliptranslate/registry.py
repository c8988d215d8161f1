"""The registry of translation providers and their enabled/disabled state."""

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .config import DEFAULT_PROVIDER_ORDER, AppConfig
from .errors import UnknownProviderError
from .languages import Language
from .models import ProviderId
from .translators import TRANSLATOR_MAPPING, BaseTranslator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProviderDescriptor:
    """A registered provider: its id and the translator serving it."""

    provider_id: ProviderId
    translator: BaseTranslator

    def can_support(self, target_language: Language) -> bool:
        """Delegate the eligibility check to the translator."""
        return self.translator.can_support(target_language)


class ActiveProviderRegistry:
    """
    Holds every known provider in priority order and which of them are active.

    Toggle operations come from the user-facing side; pipeline runs only read
    through `snapshot`. A lock serializes both.
    """

    def __init__(self, descriptors: Iterable[ProviderDescriptor] = ()) -> None:
        """Register the given descriptors, in order, all inactive."""
        self._descriptors: dict[ProviderId, ProviderDescriptor] = {}
        self._active: set[ProviderId] = set()
        self._lock = threading.Lock()
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: ProviderDescriptor) -> None:
        """Add a provider after the ones already registered."""
        with self._lock:
            self._descriptors[descriptor.provider_id] = descriptor

    @property
    def known_providers(self) -> tuple[ProviderId, ...]:
        """All registered providers in priority order."""
        with self._lock:
            return tuple(self._descriptors)

    @property
    def active_providers(self) -> tuple[ProviderId, ...]:
        """The active providers in priority order."""
        with self._lock:
            return tuple(pid for pid in self._descriptors if pid in self._active)

    def _require_known(self, provider_id: ProviderId) -> None:
        if provider_id not in self._descriptors:
            msg = f"Provider '{provider_id.value}' is not registered."
            raise UnknownProviderError(msg)

    def activate(self, provider_id: ProviderId) -> None:
        """Mark a provider as active."""
        with self._lock:
            self._require_known(provider_id)
            self._active.add(provider_id)
        logger.debug("Activated provider '%s'", provider_id.value)

    def deactivate(self, provider_id: ProviderId) -> None:
        """Mark a provider as inactive."""
        with self._lock:
            self._require_known(provider_id)
            self._active.discard(provider_id)
        logger.debug("Deactivated provider '%s'", provider_id.value)

    def passivate_all(self) -> None:
        """Deactivate every provider."""
        with self._lock:
            self._active.clear()

    def is_active(self, provider_id: ProviderId) -> bool:
        """Check whether a provider is active."""
        with self._lock:
            return provider_id in self._active

    def _ensure_any_active(self) -> None:
        # Caller holds the lock.
        if not self._active and self._descriptors:
            logger.info("No provider is active. Activating all %d known providers.", len(self._descriptors))
            self._active.update(self._descriptors)

    def _eligible(self, target_language: Language) -> list[ProviderDescriptor]:
        self._ensure_any_active()
        return [d for pid, d in self._descriptors.items() if pid in self._active and d.can_support(target_language)]

    def eligible_providers(self, target_language: Language) -> tuple[ProviderId, ...]:
        """Return the active providers able to translate into `target_language`, in priority order."""
        with self._lock:
            return tuple(d.provider_id for d in self._eligible(target_language))

    def snapshot(self, target_language: Language) -> tuple[BaseTranslator, ...]:
        """
        Return the translators a pipeline run should invoke.

        The tuple is a consistent view taken under the lock; later toggles do
        not affect a run that already holds it.
        """
        with self._lock:
            return tuple(d.translator for d in self._eligible(target_language))

    async def close(self) -> None:
        """Close every registered translator."""
        for descriptor in tuple(self._descriptors.values()):
            await descriptor.translator.close()


TranslatorFactory = Callable[[ProviderId, AppConfig], BaseTranslator]


def create_translator(provider_id: ProviderId, config: AppConfig) -> BaseTranslator:
    """Instantiate the translator class of a provider with its settings."""
    translator_class = TRANSLATOR_MAPPING.get(provider_id)
    if translator_class is None:
        msg = f"No translator class mapped for provider: '{provider_id.value}'"
        raise UnknownProviderError(msg)
    return translator_class(config.provider_settings(provider_id), timeout=config.provider_timeout)


def build_registry(config: AppConfig, factory: TranslatorFactory = create_translator) -> ActiveProviderRegistry:
    """
    Build the registry described by the configuration.

    The standard providers are registered in their default order, followed by
    any other configured provider (such as `mock`). Providers whose settings
    say `enabled: true` start active.
    """
    order = list(DEFAULT_PROVIDER_ORDER)
    order.extend(pid for pid in config.providers if pid not in order)

    registry = ActiveProviderRegistry()
    for provider_id in order:
        registry.register(ProviderDescriptor(provider_id, factory(provider_id, config)))
        settings = config.providers.get(provider_id)
        if settings is not None and settings.enabled:
            registry.activate(provider_id)

    logger.debug("Registered providers: %s (active: %s)", [p.value for p in registry.known_providers], [p.value for p in registry.active_providers])
    return registry
