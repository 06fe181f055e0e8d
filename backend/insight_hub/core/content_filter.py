"""Rules that keep source code and secrets out of shared insights."""

from __future__ import annotations

import re
from dataclasses import dataclass
from re import Pattern
from typing import Iterable, Optional

ABSTRACT_TERMS_MESSAGE = (
    "Content appears to contain code or sensitive data. "
    "Please share insights in abstract terms."
)


@dataclass(frozen=True)
class ContentRule:
    """A regular expression paired with the message reported on a match."""

    pattern: Pattern[str]
    message: str = ABSTRACT_TERMS_MESSAGE

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def rule(expression: str, message: str = ABSTRACT_TERMS_MESSAGE, flags: int = re.ASCII) -> ContentRule:
    """Compile ``expression`` into a :class:`ContentRule`.

    Rules default to ASCII word classes, so ``\\b`` treats accented letters
    as word boundaries.
    """

    return ContentRule(pattern=re.compile(expression, flags), message=message)


DEFAULT_RULES: tuple[ContentRule, ...] = (
    rule(r"```[\s\S]*?```"),  # fenced code blocks
    rule(r"function\s+\w+\s*\("),
    rule(r"class\s+\w+"),
    rule(r"import\s+.*from"),
    rule(r"\bAPI[_\s]?KEY\b", flags=re.ASCII | re.IGNORECASE),
    rule(r"\bPASSWORD\b", flags=re.ASCII | re.IGNORECASE),
    rule(r"\bSECRET\b", flags=re.ASCII | re.IGNORECASE),
)


def first_violation(text: str, rules: Iterable[ContentRule]) -> Optional[ContentRule]:
    """Return the first rule that matches ``text``, or ``None``."""

    for candidate in rules:
        if candidate.matches(text):
            return candidate
    return None
