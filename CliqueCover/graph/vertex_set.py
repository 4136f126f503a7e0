from typing import Iterator, List


class AllocationError(MemoryError):
    """Raised when a VertexSet cannot be created with the requested capacity."""


class VertexSet:
    """
    Ordered, fixed-capacity collection of vertex indices.

    Adding beyond capacity is silently ignored and nothing checks for
    duplicates or out-of-range vertices; callers size their sets for the
    worst case and keep membership unique themselves.
    """

    __slots__ = ("vertices", "capacity")

    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise AllocationError(f"Cannot allocate a vertex set of capacity {capacity!r}")
        self.vertices: List[int] = []
        self.capacity = capacity

    @staticmethod
    def from_vertices(vertices, capacity: int | None = None) -> "VertexSet":
        vertices = list(vertices)
        s = VertexSet(len(vertices) if capacity is None else capacity)
        for v in vertices:
            s.add(v)
        return s

    @property
    def size(self) -> int:
        return len(self.vertices)

    def add(self, vertex: int) -> None:
        if len(self.vertices) < self.capacity:
            self.vertices.append(vertex)

    def remove_last(self) -> None:
        if self.vertices:
            self.vertices.pop()

    def discard(self, vertex: int) -> None:
        """Remove the first occurrence of `vertex`, keeping the order of the rest."""
        try:
            self.vertices.remove(vertex)
        except ValueError:
            pass

    def copy(self) -> "VertexSet":
        return VertexSet.from_vertices(self.vertices)

    def destroy(self) -> None:
        self.vertices = []
        self.capacity = 0

    def to_list(self) -> List[int]:
        return list(self.vertices)

    def __enter__(self) -> "VertexSet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[int]:
        return iter(self.vertices)

    def __getitem__(self, index: int) -> int:
        return self.vertices[index]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    def __eq__(self, other: object) -> bool:
        if isinstance(other, VertexSet):
            return self.vertices == other.vertices
        return NotImplemented

    def __repr__(self) -> str:
        return f"VertexSet({self.vertices}, capacity={self.capacity})"
