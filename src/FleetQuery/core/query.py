from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

# A token is a run of non-space characters where double-quoted segments may
# contain spaces. A lone unbalanced quote becomes its own token and is dropped.
_TOKEN_RE = re.compile(r'(?:"[^"]*"|[^\s"])+|"')
_KEY_VALUE_RE = re.compile(r'^([^\s":]+):([^":]*|"[^"]*")$')


@dataclass(frozen=True, slots=True)
class KeyValueTerm:
    """A `field:substring` condition.

    Attributes:
        key: Field name as typed by the user.
        value: Substring that must appear in the field's text. May be empty.
    """

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class FilterQuery:
    """Parsed filter expression.

    Every term is AND-ed: each free-text term must match some visible field,
    and each key:value term must match its named field. Repeated keys are
    independent conditions.

    Attributes:
        text_terms: Free-text substrings.
        key_terms: Field-scoped substrings.
    """

    text_terms: tuple[str, ...] = ()
    key_terms: tuple[KeyValueTerm, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when the query filters nothing out."""
        return not self.text_terms and not self.key_terms

    def unknown_keys(self, known: Iterable[str]) -> list[str]:
        """Return key:value keys that do not name any of ``known`` fields.

        Comparison is case-insensitive. Order and duplicates follow the query.
        """
        names = {name.casefold() for name in known}
        return [term.key for term in self.key_terms if term.key.casefold() not in names]


def parse_filter(text: str | None) -> FilterQuery:
    """Parse a free-form filter string.

    Never fails: anything that is not a well-formed ``key:value`` token is
    kept as a free-text term. A double-quoted run is a single term.

    Args:
        text: Raw filter string; None or blank yields an empty query.

    Returns:
        Parsed query.
    """
    if not text or not text.strip():
        return FilterQuery()

    text_terms: list[str] = []
    key_terms: list[KeyValueTerm] = []
    for token in _TOKEN_RE.findall(text):
        match = _KEY_VALUE_RE.match(token)
        if match:
            key_terms.append(KeyValueTerm(key=match.group(1), value=_unquote(match.group(2))))
            continue
        term = _unquote(token)
        if term:
            text_terms.append(term)
    return FilterQuery(text_terms=tuple(text_terms), key_terms=tuple(key_terms))


def _unquote(token: str) -> str:
    return token.replace('"', "")
