"""
Merge climate observations into their queries.

Alignment is strictly by position. If the service reorders results, the
caller has to re-key them before merging.
"""

from typing import List, Sequence

from routesheet.shared.errors import AlignmentError

from .models import ClimateQuery, ClimateRow, Observation


def merge_observations(
    queries: Sequence[ClimateQuery],
    observations: Sequence[Observation]
) -> List[ClimateRow]:
    """
    Combine the i-th query with the i-th observation.

    Raises:
        AlignmentError: If the sequences differ in length
    """
    if len(queries) != len(observations):
        raise AlignmentError(expected=len(queries), actual=len(observations))

    return [
        ClimateRow.combine(query, observation)
        for query, observation in zip(queries, observations)
    ]
