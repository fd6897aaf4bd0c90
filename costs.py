"""Operation codes and the per-operation cost table."""


import dataclasses


from enum import Enum
from typing import Tuple


INS_COST = 1
SUB_COST = 1
DEL_COST = 1


class Op(Enum):
    ONSET = 0
    MATCH = 1
    INSERT = 2
    REPLACE = 3
    DELETE = 4


Cost = int


@dataclasses.dataclass(frozen=True)
class Costs:
    """Weights for the five operations.

    Onset and match always cost nothing. The other three can be changed, but
    only by building a new table with one of the with_* methods.
    """

    on_insert: Cost = INS_COST
    on_replace: Cost = SUB_COST
    on_delete: Cost = DEL_COST

    on_set = 0
    on_match = 0

    def with_insert(self, cost: Cost) -> 'Costs':
        return dataclasses.replace(self, on_insert=cost)

    def with_replace(self, cost: Cost) -> 'Costs':
        return dataclasses.replace(self, on_replace=cost)

    def with_delete(self, cost: Cost) -> 'Costs':
        return dataclasses.replace(self, on_delete=cost)

    def as_tuple(self) -> Tuple[Cost, Cost, Cost, Cost, Cost]:
        """Returns the costs ordered by operation code."""
        return (
            self.on_set,
            self.on_match,
            self.on_insert,
            self.on_replace,
            self.on_delete,
        )

    def cost(self, op: Op) -> Cost:
        return self.as_tuple()[op.value]
