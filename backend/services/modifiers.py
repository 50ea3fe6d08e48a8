"""Negation / emphasis / fuzzy-range modifier extraction."""

from collections.abc import Sequence

from models.schemas.query import QueryModifiers

NEGATION_TRIGGERS = frozenset({"not", "no", "except", "without"})
EMPHASIS_TRIGGERS = frozenset({"must", "only", "require", "need"})
FUZZY_TRIGGERS = frozenset({"around", "about", "approximately", "~"})

# Non-alphanumeric triggers the tokenizer has to keep for us
MODIFIER_SYMBOLS = frozenset({"~"})


def extract_modifiers(tokens: Sequence[str]) -> QueryModifiers:
    """Capture the single token following each trigger word.

    Only one following token is captured, so "not a data engineer" negates
    "data" alone.
    """
    negations: list[str] = []
    emphasis: list[str] = []
    fuzzy: list[str] = []

    for index, token in enumerate(tokens[:-1]):
        operand = tokens[index + 1]
        if token in NEGATION_TRIGGERS:
            negations.append(operand)
        if token in EMPHASIS_TRIGGERS:
            emphasis.append(operand)
        if token in FUZZY_TRIGGERS:
            fuzzy.append(operand)

    return QueryModifiers(
        negations=tuple(negations),
        emphasis=tuple(emphasis),
        fuzzy=tuple(fuzzy),
    )
