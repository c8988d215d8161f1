"""Test doubles shared by several test modules."""

from cliptranslate.config import ProviderSettings
from cliptranslate.models import ProviderId
from cliptranslate.registry import ActiveProviderRegistry, ProviderDescriptor
from cliptranslate.translators.base import BaseTranslator
from cliptranslate.translators.mock_translator import MockTranslator


class StubTranslator(MockTranslator):
    """A MockTranslator that reports a chosen provider id."""

    def __init__(self, provider_id: ProviderId, **kwargs: object) -> None:
        super().__init__(ProviderSettings(), **kwargs)  # type: ignore[arg-type]
        self.provider_id = provider_id  # type: ignore[misc]


def make_registry(*translators: BaseTranslator, active: bool = True) -> ActiveProviderRegistry:
    """Register translators in the given order, all active unless told otherwise."""
    registry = ActiveProviderRegistry(ProviderDescriptor(t.provider_id, t) for t in translators)
    if active:
        for translator in translators:
            registry.activate(translator.provider_id)
    return registry
