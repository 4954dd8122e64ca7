"""
Reference ordering for token declarations.

Some stylesheet languages are imperative: a variable must be declared
before any declaration that uses it. When tokens are emitted as live
references (a -> b -> c), they have to come out tail-first: c, b, a.

This module computes that order with an explicit topological sort over
the reference graph:
    - Input order breaks ties (the earliest ready token is emitted next)
    - A token without references is never moved behind a later one
      unless a reference forces it
    - References to names outside the token set impose no constraint
    - Cycles fail fast with ReferenceCycleError

IMPORTANT: Ordering never mutates its input. It returns a new list.
"""

from __future__ import annotations

import heapq
from typing import Dict, Iterable, List, Optional

from tokenvars.logconfig import get_logger
from tokenvars.model import Token

log = get_logger("tokenvars.ordering")


class ReferenceCycleError(ValueError):
    """Raised when tokens reference each other in a loop."""

    def __init__(self, cycle: List[str]):
        self.cycle = cycle
        super().__init__(f"Circular reference detected: {' -> '.join(cycle)}")


def build_reference_graph(tokens: Iterable[Token]) -> Dict[str, List[str]]:
    """
    Build the adjacency list token name -> referenced token names.

    Only references to names present in `tokens` are kept, each once,
    in the order the token lists them.
    """
    tokens = list(tokens)
    names = {t.name for t in tokens}
    graph: Dict[str, List[str]] = {}
    for token in tokens:
        targets = graph.setdefault(token.name, [])
        for ref in token.references:
            if ref in names and ref not in targets:
                targets.append(ref)
    return graph


def find_reference_cycle(tokens: Iterable[Token]) -> Optional[List[str]]:
    """
    Find one reference cycle among `tokens`.

    Returns:
        Cycle path with the first name repeated at the end
        (e.g. ["a", "b", "a"]), or None when the references form a DAG
    """
    graph = build_reference_graph(tokens)
    done: set = set()

    for start in graph:
        if start in done:
            continue
        path = [start]
        on_path = {start}
        stack = [iter(graph[start])]
        while stack:
            neighbor = next(stack[-1], None)
            if neighbor is None:
                stack.pop()
                node = path.pop()
                on_path.discard(node)
                done.add(node)
                continue
            if neighbor in on_path:
                return path[path.index(neighbor):] + [neighbor]
            if neighbor not in done:
                path.append(neighbor)
                on_path.add(neighbor)
                stack.append(iter(graph[neighbor]))
    return None


def sort_by_reference(tokens: Iterable[Token]) -> List[Token]:
    """
    Order tokens so that every token follows the tokens it references.

    Kahn's algorithm with a min-heap on input position: among the tokens
    whose references have all been emitted, the one that appeared first
    in the input goes next. With no references the input order is
    returned unchanged.

    Args:
        tokens: Tokens in their default (insertion) order

    Returns:
        New list holding exactly the same tokens

    Raises:
        ReferenceCycleError: If the references contain a cycle
    """
    tokens = list(tokens)

    index_by_name: Dict[str, int] = {}
    for i, token in enumerate(tokens):
        index_by_name.setdefault(token.name, i)

    dependents: List[List[int]] = [[] for _ in tokens]
    pending = [0] * len(tokens)

    for i, token in enumerate(tokens):
        seen = set()
        for ref in token.references:
            j = index_by_name.get(ref)
            if j is None:
                log.debug("missing_reference", token=token.name, reference=ref)
                continue
            if j in seen:
                continue
            seen.add(j)
            dependents[j].append(i)
            pending[i] += 1

    ready = [i for i, count in enumerate(pending) if count == 0]
    heapq.heapify(ready)

    ordered: List[Token] = []
    while ready:
        i = heapq.heappop(ready)
        ordered.append(tokens[i])
        for d in dependents[i]:
            pending[d] -= 1
            if pending[d] == 0:
                heapq.heappush(ready, d)

    if len(ordered) < len(tokens):
        blocked = [t for i, t in enumerate(tokens) if pending[i] > 0]
        cycle = find_reference_cycle(blocked) or [t.name for t in blocked]
        log.debug("reference_cycle", cycle=cycle)
        raise ReferenceCycleError(cycle)

    return ordered


__all__ = [
    "ReferenceCycleError",
    "build_reference_graph",
    "find_reference_cycle",
    "sort_by_reference",
]
