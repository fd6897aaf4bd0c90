"""Computes weighted Levenshtein distance together with its full cost matrix."""


import logging


from costs import Cost, Costs, Op
from distmatrix import Candidate, DistanceMatrix, String
from typing import Iterable, List, NamedTuple, Optional, Tuple


Matrix = Tuple[Tuple[Cost, ...], ...]
Trace = Tuple[Tuple[Candidate, ...], ...]
Script = List[Op]


class Results(NamedTuple):
    distance: Cost
    sequence: Matrix
    operations: Trace


class Levenshtein:
    """Calculates edit distances under one cost table.

    The cost table is replaced, never modified, by the setters, and each
    calculation works on the table that was current when it started.
    """

    def __init__(self, costs: Optional[Costs] = None):
        self.costs = Costs() if costs is None else costs

    def set_insert_cost(self, cost: Cost) -> None:
        self.costs = self.costs.with_insert(cost)

    def set_replace_cost(self, cost: Cost) -> None:
        self.costs = self.costs.with_replace(cost)

    def set_delete_cost(self, cost: Cost) -> None:
        self.costs = self.costs.with_delete(cost)

    def calculate(self, seq1: String, seq2: String) -> Results:
        costs = self.costs
        matrix = DistanceMatrix(seq1, seq2)
        operations = [[matrix.onset()] * matrix.length[0]
                for _ in range(matrix.length[1])]
        for x in range(matrix.length[0]):
            for y in range(matrix.length[1]):
                candidate = operation(x, y, matrix)
                matrix.sequence[y][x] = candidate.value + costs.cost(candidate.op)
                operations[y][x] = candidate
                logging.debug('(%d, %d): %s from (%d, %d) -> %d', x, y,
                        candidate.op.name, candidate.x, candidate.y,
                        matrix.sequence[y][x])
        distance = matrix.distance()
        logging.info('%d x %d matrix, costs %s, distance %d',
                matrix.length[0], matrix.length[1], costs.as_tuple(), distance)
        return Results(
            distance,
            tuple(tuple(row) for row in matrix.sequence),
            tuple(tuple(row) for row in operations),
        )


def operation(x: int, y: int, matrix: DistanceMatrix) -> Candidate:
    """Picks the operation that produces cell (x, y)."""
    char1, char2 = matrix.chars(x, y)
    replace = matrix.replace_position(x, y)
    if replace.x == -1 and replace.y == -1:
        return matrix.onset()
    if char1 == char2:
        return matrix.match(replace)
    return select((
        matrix.insert(matrix.insert_position(x, y)),
        matrix.replace(replace),
        matrix.delete(matrix.delete_position(x, y)),
    ))


def select(candidates: Iterable[Candidate]) -> Candidate:
    """Returns the valid candidate with the smallest predecessor value.

    Costs are not taken into account. On ties the earliest candidate wins.
    """
    best = None
    for candidate in candidates:
        if not candidate.valid():
            continue
        if best is None or candidate.value < best.value:
            best = candidate
    assert best is not None, 'Failed to retrieve minimum operation'
    return best


def script(results: Results) -> Script:
    """Returns the operations leading to the last cell, first one first."""
    operations = results.operations
    return backtrace(len(operations[0]) - 1, len(operations) - 1, operations)


def backtrace(x: int, y: int, operations: Trace) -> Script:
    script: Script = []
    while x >= 0 and y >= 0:
        candidate = operations[y][x]
        if candidate.op == Op.ONSET:
            break
        script.append(candidate.op)
        x, y = candidate.x, candidate.y
    script.reverse()
    return script
