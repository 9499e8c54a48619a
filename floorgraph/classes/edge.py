"""
Undirected edge representation for the graph.

An edge is an unordered pair of payload values. It stores copies of the
endpoint data rather than references to the graph's vertices.
"""

from typing import Generic, Iterator, Tuple

from .exceptions import EdgeDoesNotContainVertex
from .vertex import Data


class Edge(Generic[Data]):
    """
    Unordered pair {vertex1, vertex2}.

    Edge(a, b) == Edge(b, a), and both hash identically. The construction
    order is kept only so endpoints can be reported back the way the caller
    supplied them.
    """

    __slots__ = ("_vertex1", "_vertex2")

    def __init__(self, vertex1: Data, vertex2: Data):
        object.__setattr__(self, "_vertex1", vertex1)
        object.__setattr__(self, "_vertex2", vertex2)

    @property
    def vertex1(self) -> Data:
        return self._vertex1

    @property
    def vertex2(self) -> Data:
        return self._vertex2

    @property
    def endpoints(self) -> Tuple[Data, Data]:
        """Endpoints in construction order."""
        return (self._vertex1, self._vertex2)

    @property
    def is_self_loop(self) -> bool:
        return self._vertex1 == self._vertex2

    def contains(self, vertex: Data) -> bool:
        return self._vertex1 == vertex or self._vertex2 == vertex

    def other_end(self, vertex: Data) -> Data:
        """
        Return the endpoint opposite to the given one.

        For u <--> v, passing u returns v and passing v returns u. A self-loop
        returns the vertex itself.

        Raises:
            EdgeDoesNotContainVertex: If vertex is not an endpoint of this edge
        """
        if self._vertex1 == vertex:
            return self._vertex2
        if self._vertex2 == vertex:
            return self._vertex1
        raise EdgeDoesNotContainVertex(vertex, self)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        # slots are restored through setattr, which is blocked
        return (Edge, (self._vertex1, self._vertex2))

    def __iter__(self) -> Iterator[Data]:
        return iter(self.endpoints)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return ((self._vertex1 == other._vertex1 and self._vertex2 == other._vertex2)
                or (self._vertex1 == other._vertex2 and self._vertex2 == other._vertex1))

    def __hash__(self) -> int:
        return hash(frozenset((self._vertex1, self._vertex2)))

    def __repr__(self) -> str:
        return f"Edge({self._vertex1!r}, {self._vertex2!r})"

    def __str__(self) -> str:
        return f"{self._vertex1}  <--->  {self._vertex2}"
