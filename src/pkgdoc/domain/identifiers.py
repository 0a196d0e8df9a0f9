"""Namespace identifier rules.

A PSR-4 identifier is a ``\\``-delimited sequence of segments made of word
characters, e.g. ``Company\\Project\\Package``. Leading and trailing
separators are insignificant and are trimmed on normalization.

INVARIANT: A normalized identifier is never empty and never begins or
ends with a separator.
"""

from __future__ import annotations

import re

from pkgdoc.domain.errors import InvalidIdentifier

SEPARATOR = "\\"

# Anything outside ASCII word characters and the namespace separator.
_ILLEGAL_CHARACTERS = re.compile(r"[^\w\\]", re.ASCII)


def is_valid_identifier(identifier: str) -> bool:
    """Check that *identifier* holds only word characters and separators.

    An empty string passes this check; emptiness is rejected later by
    :func:`normalize_identifier`.
    """
    return _ILLEGAL_CHARACTERS.search(identifier) is None


def trim_identifier(identifier: str) -> str:
    """Strip leading and trailing separators. Idempotent."""
    return identifier.strip(SEPARATOR)


def normalize_identifier(identifier: str) -> str:
    """Validate and trim *identifier*.

    Raises:
        InvalidIdentifier: If the identifier contains illegal characters,
            or is empty once separators are trimmed.
    """
    if not is_valid_identifier(identifier):
        raise InvalidIdentifier(identifier)
    normalized = trim_identifier(identifier)
    if not normalized:
        raise InvalidIdentifier(identifier, reason="identifier is empty")
    return normalized


def parent_identifier(identifier: str) -> str | None:
    """Return *identifier* without its last segment.

    Examples:
        >>> parent_identifier("A\\\\B\\\\C")
        'A\\\\B'
        >>> parent_identifier("Root") is None
        True
    """
    head, sep, _tail = identifier.rpartition(SEPARATOR)
    if not sep:
        return None
    return head


def join_identifier(parent: str, name: str) -> str:
    """Append a child segment to *parent*."""
    return f"{parent}{SEPARATOR}{name}"


def identifier_to_path(identifier: str) -> str:
    """Convert namespace separators in *identifier* to ``/``."""
    return identifier.replace(SEPARATOR, "/")
