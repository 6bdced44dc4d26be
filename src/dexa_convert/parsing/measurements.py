from typing import Sequence

from dexa_convert.models.records import Measurement

BLOCK_SIZE = 4


def group_measurements(values: Sequence[float]) -> tuple[Measurement, ...]:
    """Fold a flat value run into (total, left, right, delta) blocks.

    A trailing remainder shorter than a full block is dropped.
    """
    complete = len(values) - len(values) % BLOCK_SIZE
    return tuple(
        Measurement(total=values[i], left=values[i + 1], right=values[i + 2], delta=values[i + 3])
        for i in range(0, complete, BLOCK_SIZE)
    )
