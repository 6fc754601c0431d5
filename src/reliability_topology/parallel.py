"""Process-parallel combination search.

The search space splits on the include/exclude decisions of the leading
catalog edges. Each partition is searched independently in a worker process
and the partial results are reduced in enumeration order, which yields the
same answer as a sequential search. A goal hit in one partition stops the
workers searching later partitions.
"""

from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from multiprocessing import Manager
from typing import TYPE_CHECKING

from reliability_topology.combinations import iter_combinations, partition_prefixes
from reliability_topology.optimizer import search
from reliability_topology.types import SearchResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from reliability_topology.optimizer import StopFlag
    from reliability_topology.types import Edge, EnumerationMode, Requirements, SearchConfig

logger = logging.getLogger(__name__)


def search_partition(
    edges: tuple[Edge, ...],
    n_nodes: int,
    requirements: Requirements,
    mode: EnumerationMode,
    prefix: tuple[bool, ...],
    stop: StopFlag | None = None,
) -> SearchResult:
    """Search the subsets consistent with one include/exclude prefix.

    stop is polled while searching; once set, the partition returns early.
    """
    return search(n_nodes, requirements, iter_combinations(edges, n_nodes, mode, prefix), stop)


def merge_results(results: Sequence[SearchResult]) -> SearchResult:
    """Reduce partition results given in enumeration order.

    The first result that met the reliability goal wins outright. Otherwise
    the strictly most reliable result wins, ties going to the earlier one.
    examined is summed over all results.
    """
    examined = sum(r.examined for r in results)
    best = SearchResult()
    for r in results:
        if r.goal_met:
            best = r
            break
        if r.reliability > best.reliability:
            best = r
    return SearchResult(
        reliability=best.reliability,
        cost=best.cost,
        combination=best.combination,
        examined=examined,
        goal_met=best.goal_met,
    )


def parallel_search(
    edges: Sequence[Edge],
    n_nodes: int,
    requirements: Requirements,
    config: SearchConfig,
) -> SearchResult:
    """Search every partition across a process pool and merge the results.

    Each partition gets its own stop event shared with the workers. When a
    partition meets the reliability goal, every later partition is cancelled
    if still queued or stopped if already running. Earlier partitions always
    run to completion, since one of them may meet the goal first in
    enumeration order.
    """
    edges = tuple(edges)
    prefixes = partition_prefixes(len(edges), config.split_depth)
    logger.info(
        "Splitting search into %d partitions across %d workers",
        len(prefixes),
        config.workers,
    )

    results: list[SearchResult | None] = [None] * len(prefixes)
    first_goal = len(prefixes)
    with Manager() as manager, ProcessPoolExecutor(max_workers=config.workers) as executor:
        stops = [manager.Event() for _ in prefixes]
        futures = {
            executor.submit(
                search_partition, edges, n_nodes, requirements, config.mode, prefix, stop
            ): i
            for i, (prefix, stop) in enumerate(zip(prefixes, stops, strict=True))
        }
        for future in as_completed(futures):
            if future.cancelled():
                continue
            i = futures[future]
            result = future.result()
            results[i] = result
            logger.debug(
                "Partition %d/%d: reliability=%.6g, examined=%d%s",
                i + 1,
                len(prefixes),
                result.reliability,
                result.examined,
                " (stopped)" if result.stopped else "",
            )
            if result.goal_met and i < first_goal:
                for later, j in futures.items():
                    if i < j < first_goal:
                        later.cancel()
                        stops[j].set()
                first_goal = i

    # Only partitions after the first goal hit can be missing or stopped, and
    # the merge never looks past that hit.
    return merge_results([r for r in results if r is not None])
