# src/cgp_core/analysis/results.py
"""
Immutable result contracts produced by the analysis services.

`DelayMap` keeps node delays and output delays in two separately typed
mappings and layers a read-only unified view on top, so consumers that expect
the combined `{index | "output-{i}": delay}` shape can still use it.
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Union

from ..constants import OUTPUT_KEY_PREFIX, output_key
from ..validation.issues import ValidationIssue

DelayKey = Union[int, str]


class DelayMap(Mapping):
    """Read-only facade over per-node and per-output delays."""

    def __init__(self, node_delays: Dict[int, int], output_delays: Dict[int, int]):
        self._node_delays = MappingProxyType(dict(node_delays))
        self._output_delays = MappingProxyType(dict(output_delays))

    @property
    def node_delays(self) -> Mapping:
        """Delays keyed by primary-input or defined-node index."""
        return self._node_delays

    @property
    def output_delays(self) -> Mapping:
        """Delays keyed by output position."""
        return self._output_delays

    def node_delay(self, index: int) -> int:
        return self._node_delays[index]

    def output_delay(self, position: int) -> int:
        return self._output_delays[position]

    def __getitem__(self, key: DelayKey) -> int:
        if isinstance(key, str) and key.startswith(OUTPUT_KEY_PREFIX):
            suffix = key[len(OUTPUT_KEY_PREFIX):]
            if not suffix.isdigit():
                raise KeyError(key)
            return self._output_delays[int(suffix)]
        if isinstance(key, int) and not isinstance(key, bool):
            return self._node_delays[key]
        raise KeyError(key)

    def __iter__(self) -> Iterator[DelayKey]:
        yield from self._node_delays
        for position in self._output_delays:
            yield output_key(position)

    def __len__(self) -> int:
        return len(self._node_delays) + len(self._output_delays)

    def as_dict(self) -> Dict[DelayKey, int]:
        return dict(self.items())

    def __repr__(self) -> str:
        return f"DelayMap({self.as_dict()!r})"


@dataclass(frozen=True)
class ActiveNodeResults:
    """Active node indices plus any dangling-reference warnings met while tracing them."""
    active_nodes: FrozenSet[int]
    issues: List[ValidationIssue] = field(default_factory=list)


@dataclass(frozen=True)
class PathHighlight:
    """
    Node keys (as strings, e.g. "7" or "output-0") and edge keys ("src->dst")
    lying on the backward path from a selected element.
    """
    nodes: FrozenSet[str]
    edges: FrozenSet[str]
