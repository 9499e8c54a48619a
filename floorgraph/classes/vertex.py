"""
Vertex representation for the graph.

A vertex is nothing more than a value wrapper: two vertices are the same
vertex when their payloads compare equal.
"""

from typing import Generic, Hashable, TypeVar

Data = TypeVar("Data", bound=Hashable)


class Vertex(Generic[Data]):
    """
    Immutable wrapper around a single payload value.

    Equality and hashing delegate to the payload, so a Vertex can be used
    interchangeably as a dictionary key with any other Vertex of equal data.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Data):
        object.__setattr__(self, "_data", data)

    @property
    def data(self) -> Data:
        return self._data

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Vertex, (self._data,))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Vertex({self._data!r})"
