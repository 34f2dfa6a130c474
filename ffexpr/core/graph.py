"""Composition of rendered filters into ffmpeg filter graphs."""

from dataclasses import dataclass, field
from typing import Optional, Union

from .constants import GROUP_SEPARATOR, PART_SEPARATOR
from .errors import InvalidArgument
from .function import FilterFunction
from .sanitize import wrap_label
from .validate import is_true, not_empty

GraphItem = Union[FilterFunction, str, type]


def _render_item(item: GraphItem) -> Optional[str]:
    """Render one chain member; builder classes render as their bare name."""
    if item is None:
        return None
    if isinstance(item, FilterFunction):
        return item.to_string() or None
    if isinstance(item, type):
        if not issubclass(item, FilterFunction):
            raise InvalidArgument(f"{item.__name__} is not a filter builder")
        return item.name
    text = str(item)
    return text or None


@dataclass
class Graph:
    """A chain of filters connected in sequence.

    Renders as ``[in1][in2]f1,f2[out]``.
    """
    inputs: list[str] = field(default_factory=list)
    filters: list[str] = field(default_factory=list)
    output: Optional[str] = None

    @classmethod
    def stream(cls, *streams: Union[int, str]) -> "Graph":
        """Start a chain reading the given stream labels."""
        return cls(inputs=[str(s) for s in streams if s is not None])

    @classmethod
    def append(cls, *items: GraphItem) -> "Graph":
        """Start an unlabelled chain from filters."""
        return cls().add(*items)

    def add(self, *items: GraphItem) -> "Graph":
        """Add filters (builders, raw expressions or builder classes)."""
        for item in items:
            rendered = _render_item(item)
            if rendered:
                self.filters.append(rendered)
        return self

    def to(self, alias: str) -> "Graph":
        """Label the chain output."""
        self.output = alias
        return self

    tag = to

    def get_input(self) -> str:
        return "".join(wrap_label(s) for s in self.inputs)

    def get_alias(self) -> str:
        return wrap_label(self.output)

    def to_string(self) -> str:
        """Convert the chain to a filter string."""
        chain = PART_SEPARATOR.join(self.filters)
        return f"{self.get_input()}{chain}{self.get_alias()}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass
class FilterGraph:
    """A complete ``-vf`` / ``-filter_complex`` value made of chains."""
    kind: str
    graphs: list[Graph] = field(default_factory=list)
    splitter: Optional[str] = None

    @classmethod
    def simple(cls) -> "FilterGraph":
        return cls.define("vf")

    @classmethod
    def complex(cls) -> "FilterGraph":
        return cls.define("filter_complex")

    @classmethod
    def define(cls, kind: str) -> "FilterGraph":
        not_empty(kind, "The filter option name cannot be empty")
        return cls(kind=kind.lstrip("-"))

    def split(self, *streams: str) -> "FilterGraph":
        """Lead the graph with ``split[a][b]...``."""
        not_empty(streams, "The input split stream name cannot be empty")
        self.splitter = "".join(wrap_label(s) for s in streams)
        return self

    def graph(self, *items: Union[Graph, GraphItem]) -> "FilterGraph":
        """Add one chain: a ready :class:`Graph`, or filters forming a new one."""
        if len(items) == 1 and isinstance(items[0], Graph):
            self.graphs.append(items[0])
        else:
            is_true(bool(items), "The filter graph cannot be empty")
            self.graphs.append(Graph.append(*items))
        return self

    def stream(self, *streams: Union[int, str]) -> Graph:
        """Add and return a new chain reading ``streams``."""
        chain = Graph.stream(*streams)
        self.graphs.append(chain)
        return chain

    def to_string(self) -> str:
        if not self.graphs:
            return ""
        parts = []
        if self.splitter:
            parts.append(f"split{self.splitter}")
        parts.extend(g.to_string() for g in self.graphs)
        return GROUP_SEPARATOR.join(parts)

    def to_args(self) -> list[str]:
        """Command-line arguments for the external collaborator."""
        value = self.to_string()
        if not value:
            return []
        return [f"-{self.kind}", value]

    def __str__(self) -> str:
        return self.to_string()
