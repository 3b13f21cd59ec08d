"""
Embedding vector value type.

An :class:`Embedding` wraps the numeric vector returned by an embeddings
endpoint for one input text. It offers cosine similarity and a compact binary
form (little-endian float32 per component, no header) suitable for storing in
a database BLOB column.
"""
from __future__ import annotations

import math
import struct
from typing import Iterable, List, Optional, Tuple

from ..errors import LogicError

_FLOAT_SIZE = 4
# Smallest magnitude that rounds to infinity when narrowed to float32.
_FLOAT32_OVERFLOW = 2.0**128 - 2.0**103


class Embedding:
    """Immutable embedding vector with a lazily computed L2 norm.

    The norm is computed at most once per instance and is not part of the
    value identity: two embeddings compare equal when their vectors do.
    """

    __slots__ = ("_vector", "_norm", "_squared_norm")

    def __init__(self, vector: Iterable[float]) -> None:
        try:
            self._vector: Tuple[float, ...] = tuple(float(v) for v in vector)
        except (TypeError, ValueError) as exc:
            raise LogicError(f"Embedding vector must contain only numbers: {exc}") from exc
        self._norm: Optional[float] = None
        self._squared_norm: Optional[float] = None

    @property
    def vector(self) -> List[float]:
        """Return a copy of the vector components."""
        return list(self._vector)

    def get_vector(self) -> List[float]:
        return self.vector

    @property
    def squared_norm(self) -> float:
        """Sum of the squared components, cached after the first access."""
        if self._squared_norm is None:
            self._squared_norm = math.fsum(v * v for v in self._vector)
        return self._squared_norm

    @property
    def norm(self) -> float:
        """L2 norm of the vector, cached after the first access."""
        if self._norm is None:
            self._norm = math.sqrt(self.squared_norm)
        return self._norm

    def __len__(self) -> int:
        return len(self._vector)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Embedding):
            return NotImplemented
        return self._vector == other._vector

    def __hash__(self) -> int:
        return hash(self._vector)

    def __repr__(self) -> str:
        return f"Embedding(dimensions={len(self._vector)})"

    def cosine_similarity(self, other: "Embedding") -> float:
        """Return the cosine similarity between this and ``other``.

        Raises:
            LogicError: When the vectors have different dimensions.

        Returns:
            ``0.0`` when either vector has zero norm, otherwise the dot product
            divided by the product of the norms. The result is symmetric and
            a non-zero vector compared with itself gives exactly ``1.0``.
        """
        if len(self._vector) != len(other._vector):
            raise LogicError("Cannot calculate similarity between vectors of different dimensions.")
        if self.squared_norm == 0.0 or other.squared_norm == 0.0:
            return 0.0
        dot = math.fsum(a * b for a, b in zip(self._vector, other._vector))
        squares = self.squared_norm * other.squared_norm
        if math.isinf(squares):
            return dot / (self.norm * other.norm)
        return dot / math.sqrt(squares)

    def serialize(self) -> bytes:
        """Pack the vector as little-endian 32-bit floats.

        Components beyond the float32 range are stored as infinity of the
        same sign.
        """
        values = [math.copysign(math.inf, v) if abs(v) >= _FLOAT32_OVERFLOW else v for v in self._vector]
        return struct.pack(f"<{len(values)}f", *values)

    @classmethod
    def deserialize(cls, data: bytes) -> "Embedding":
        """Rebuild an embedding from :meth:`serialize` output.

        Raises:
            LogicError: When the buffer length is not a multiple of 4 bytes.
        """
        if len(data) % _FLOAT_SIZE != 0:
            raise LogicError(
                f"Failed to unpack binary data into floats: {len(data)} bytes is not a multiple of {_FLOAT_SIZE}."
            )
        count = len(data) // _FLOAT_SIZE
        return cls(struct.unpack(f"<{count}f", data))


__all__ = ["Embedding"]
