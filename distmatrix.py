"""The dynamic-programming grid and the arithmetic for finding predecessors."""


from costs import Cost, Op
from typing import Any, List, NamedTuple, Sequence, Tuple


SENTINEL = '\0'


Grid = List[List[Cost]]
String = Sequence[Any]


class Position(NamedTuple):
    x: int
    y: int

    def valid(self) -> bool:
        return self.x >= 0 and self.y >= 0


class Candidate(NamedTuple):
    """A predecessor cell together with the operation that leads out of it."""
    x: int
    y: int
    value: Cost
    op: Op

    def valid(self) -> bool:
        return self.x >= 0 and self.y >= 0


def pad(seq: String) -> Tuple[Any, ...]:
    return (SENTINEL,) + tuple(seq)


class DistanceMatrix:
    """Grid of costs for two padded sequences.

    Columns (x) run along seq1, rows (y) along seq2. When seq1 is the shorter
    sequence, insertion steps along y and deletion along x; otherwise the two
    swap axes. Replacement always steps diagonally.
    """

    def __init__(self, seq1: String, seq2: String):
        self.lookup = (pad(seq1), pad(seq2))
        self.length = (len(self.lookup[0]), len(self.lookup[1]))
        self.sequence: Grid = [
            [0 for x in range(self.length[0])]
            for y in range(self.length[1])
        ]

    def chars(self, x: int, y: int) -> Tuple[Any, Any]:
        return self.lookup[0][x], self.lookup[1][y]

    def value(self, position: Position) -> Cost:
        if position.valid():
            return self.sequence[position.y][position.x]
        return 0

    def insert_position(self, x: int, y: int) -> Position:
        if self.length[0] < self.length[1]:
            return Position(x, y - 1)
        return Position(x - 1, y)

    def replace_position(self, x: int, y: int) -> Position:
        return Position(x - 1, y - 1)

    def delete_position(self, x: int, y: int) -> Position:
        if self.length[0] < self.length[1]:
            return Position(x - 1, y)
        return Position(x, y - 1)

    def candidate(self, position: Position, op: Op) -> Candidate:
        return Candidate(position.x, position.y, self.value(position), op)

    def onset(self) -> Candidate:
        return Candidate(0, 0, 0, Op.ONSET)

    def match(self, replace: Position) -> Candidate:
        return self.candidate(replace, Op.MATCH)

    def insert(self, insert: Position) -> Candidate:
        return self.candidate(insert, Op.INSERT)

    def replace(self, replace: Position) -> Candidate:
        return self.candidate(replace, Op.REPLACE)

    def delete(self, delete: Position) -> Candidate:
        return self.candidate(delete, Op.DELETE)

    def distance(self) -> Cost:
        return self.sequence[self.length[1] - 1][self.length[0] - 1]
