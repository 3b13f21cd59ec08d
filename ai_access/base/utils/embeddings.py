"""Input validation shared by embedding endpoints."""
from __future__ import annotations

from typing import List, Sequence

from ..errors import LogicError


def require_embedding_inputs(inputs: Sequence[str]) -> List[str]:
    """Return ``inputs`` as a list after checking it is usable.

    Raises:
        LogicError: When ``inputs`` is empty, is a bare string, or contains
            anything other than non-empty strings.
    """
    if isinstance(inputs, (str, bytes)):
        raise LogicError("Input must be a list of strings, not a single string.")
    items = list(inputs or ())
    if not items:
        raise LogicError("Input cannot be empty.")
    for text in items:
        if not isinstance(text, str) or text == "":
            raise LogicError("All input elements must be non-empty strings.")
    return items


__all__ = ["require_embedding_inputs"]
