# /sanctuary/models/grouping.py

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, TypedDict, TypeVar, Union

T = TypeVar("T")


@dataclass
class Group(Generic[T]):
    """A named, ordered slice of a grouped collection."""
    name: str
    items: List[T] = field(default_factory=list)


# Group key -> group, in first-seen order
GroupedItems = OrderedDict[str, Group[T]]

SortResult = Union[List[T], GroupedItems]


@dataclass(frozen=True)
class SortOption(Generic[T]):
    """
    A named grouping strategy.

    `sort` receives a copy of the input and returns either a flat list
    (identity-like strategies) or an OrderedDict of Group (grouping strategies).
    """
    label: str
    sort: Callable[[List[T]], SortResult]


class SelectionResult(TypedDict):
    """Result of selecting a strategy (and optionally a group)."""
    applied: bool
    error_code: Optional[str]
    reason: Optional[str]
    option: str
    group: Optional[str]
