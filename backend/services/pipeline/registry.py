"""Signal registry for the ranking pipeline.

Signals are stateless, so one shared instance per name is created on first use.
"""

import logging

from services.pipeline.base import BaseSignal

logger = logging.getLogger(__name__)

DEFAULT_SIGNALS = (
    "field",
    "entity",
    "concept",
    "experience",
    "intent",
    "alumni",
    "negation",
)

_registry: dict[str, BaseSignal] = {}


def _create_signal(name: str) -> BaseSignal:
    """Factory: create a signal by name with deferred imports."""
    if name == "field":
        from services.pipeline.signals import FieldSignal
        return FieldSignal()
    elif name == "entity":
        from services.pipeline.signals import EntitySignal
        return EntitySignal()
    elif name == "concept":
        from services.pipeline.signals import ConceptSignal
        return ConceptSignal()
    elif name == "experience":
        from services.pipeline.signals import ExperienceSignal
        return ExperienceSignal()
    elif name == "intent":
        from services.pipeline.signals import IntentSignal
        return IntentSignal()
    elif name == "alumni":
        from services.pipeline.signals import AlumniSignal
        return AlumniSignal()
    elif name == "negation":
        from services.pipeline.signals import NegationSignal
        return NegationSignal()
    else:
        raise ValueError(f"Unknown signal: {name}")


def get_signal(name: str) -> BaseSignal:
    """Get a signal by name, creating it on first access."""
    if name not in _registry:
        _registry[name] = _create_signal(name)
        logger.debug("Registered signal: %s", name)
    return _registry[name]


def get_signals(names: tuple[str, ...] = DEFAULT_SIGNALS) -> list[BaseSignal]:
    return [get_signal(name) for name in names]


def clear() -> None:
    """Drop all cached signals. Useful for testing."""
    _registry.clear()
