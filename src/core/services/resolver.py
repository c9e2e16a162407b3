"""Command resolution.

Maps a verb typed by the user to an `OperationKind`. Matching is exact and
case-insensitive; there is no prefix or fuzzy matching.
"""

from __future__ import annotations

import logging
from typing import Iterable

from core.domain.errors import UnrecognizedCommandError
from core.domain.models import Invocation, OperationKind

logger = logging.getLogger(__name__)

_KINDS_BY_VERB: dict[str, OperationKind] = {kind.value: kind for kind in OperationKind}


def resolve_command(verb: str) -> OperationKind:
    kind = _KINDS_BY_VERB.get(verb.lower())
    if kind is None:
        raise UnrecognizedCommandError(verb)
    logger.debug("resolved %r -> %s", verb, kind.label())
    return kind


def build_invocation(verb: str, args: Iterable[str] = ()) -> Invocation:
    """Resolve `verb` and pair it with its positional arguments."""

    return Invocation(kind=resolve_command(verb), args=tuple(args))
