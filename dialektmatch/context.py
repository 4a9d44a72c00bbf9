from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType


class Context(str, Enum):
    RESTAURANT = "restaurant"
    SHOPPING = "shopping"
    NAVIGATION = "navigation"


CONTEXT_BOOSTS: Mapping[Context, Mapping[str, float]] = MappingProxyType(
    {
        Context.RESTAURANT: MappingProxyType(
            {
                "tisch": 0.2,
                "bestellung": 0.3,
                "menü": 0.2,
                "rechnung": 0.3,
                "reservierung": 0.3,
                "kellner": 0.2,
                "service": 0.2,
                "essen": 0.1,
                "trinken": 0.1,
                "zahlen": 0.2,
            }
        ),
        Context.SHOPPING: MappingProxyType(
            {
                "kaufen": 0.3,
                "bezahlen": 0.3,
                "warenkorb": 0.3,
                "artikel": 0.2,
                "produkt": 0.2,
                "preis": 0.2,
                "franken": 0.2,
                "rabatt": 0.2,
            }
        ),
        Context.NAVIGATION: MappingProxyType(
            {
                "gehen": 0.2,
                "zeigen": 0.2,
                "öffnen": 0.2,
                "schließen": 0.2,
                "zurück": 0.2,
                "weiter": 0.2,
                "suchen": 0.2,
            }
        ),
    }
)

CONTEXT_WORDS: Mapping[Context, tuple[str, ...]] = MappingProxyType(
    {
        Context.RESTAURANT: ("tisch", "menü", "bestellung", "essen", "trinken"),
        Context.SHOPPING: ("kaufen", "warenkorb", "bezahlen", "artikel"),
        Context.NAVIGATION: ("gehen", "zeigen", "öffnen", "suchen"),
    }
)


def parse_context(value: Context | str | None) -> Context | None:
    """Map a label such as ``"Restaurant"`` to a :class:`Context`; ``None`` if unknown."""
    if value is None or isinstance(value, Context):
        return value
    if not isinstance(value, str):
        return None
    try:
        return Context(value.strip().lower())
    except ValueError:
        return None


def boosts_for(context: Context | None) -> dict[str, float]:
    if context is None:
        return {}
    return dict(CONTEXT_BOOSTS.get(context, {}))


def is_context_relevant(text: str, context: Context | None) -> bool:
    if context is None or not text:
        return False
    low = text.lower()
    return any(w in low for w in CONTEXT_WORDS.get(context, ()))
