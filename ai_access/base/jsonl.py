"""JSON Lines helpers used by batch protocols.

``dumps_jsonl`` writes one compact JSON document per line (trailing newline
included). ``iter_jsonl`` yields ``(line_number, record)`` for every
non-blank line and passes undecodable lines to ``on_error`` instead of
aborting the whole document.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple


def dumps_jsonl(records: Iterable[Any]) -> str:
    return "".join(json.dumps(r, ensure_ascii=False, separators=(",", ":")) + "\n" for r in records)


def iter_jsonl(
    text: str,
    on_error: Optional[Callable[[int, json.JSONDecodeError], None]] = None,
) -> Iterator[Tuple[int, Any]]:
    for number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            yield number, json.loads(line)
        except json.JSONDecodeError as exc:
            if on_error is None:
                raise
            on_error(number, exc)


__all__ = ["dumps_jsonl", "iter_jsonl"]
