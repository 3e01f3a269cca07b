# /sanctuary/grouping/engine.py

import logging
from collections import OrderedDict
from typing import Callable, Dict, Generic, Iterable, List, Mapping, Optional, Sequence, Tuple

from sanctuary.errors import GroupingError, StrategyNotFound
from sanctuary.models.grouping import Group, GroupedItems, SelectionResult, SortOption, SortResult, T

logger = logging.getLogger(__name__)

ANCHOR_SEPARATOR = ":"


def group_items(
    items: Iterable[T],
    key: Callable[[T], str],
    label: Callable[[T], str]
) -> GroupedItems:
    """
    Partition pre-sorted items into named groups in a single stable pass.

    A group's position is fixed by the first item assigned to it, and items
    keep their input order inside each group. The label of a group is taken
    from its first item.
    """
    groups: GroupedItems = OrderedDict()
    for item in items:
        group_key = key(item)
        if group_key not in groups:
            groups[group_key] = Group(name=label(item))
        groups[group_key].items.append(item)
    return groups


def is_grouped(result: SortResult) -> bool:
    return isinstance(result, Mapping)


def make_anchor(option: str, group: Optional[str] = None) -> str:
    """Anchor token for a strategy, or for one of its groups: 'option:group'."""
    return f"{option}{ANCHOR_SEPARATOR}{group}" if group else option


def parse_anchor(anchor: str) -> Tuple[str, Optional[str]]:
    """Split an anchor token (e.g. a URL fragment) into strategy and group keys."""
    anchor = anchor.lstrip("#")
    option, _, group = anchor.partition(ANCHOR_SEPARATOR)
    return option, (group or None)


class GroupedView(Generic[T]):
    """
    Read-only projections of a flat collection through named strategies.

    The active strategy is a single token plus an optional group key, both
    encodable as an anchor so that a view can be shared and restored.
    Selecting a strategy never mutates the input collection.
    An unregistered initial option falls back to the first registered one;
    StrategyNotFound is raised only when no option is registered at all.
    """

    def __init__(self, items: Sequence[T], options: Mapping[str, SortOption[T]], initial: str):
        if not options:
            raise StrategyNotFound(initial)
        if initial not in options:
            fallback = next(iter(options))
            logger.warning(f"Initial sort option '{initial}' is not registered; using '{fallback}'")
            initial = fallback
        self._items: Tuple[T, ...] = tuple(items)
        self._options: Dict[str, SortOption[T]] = dict(options)
        self.option = initial
        self.group: Optional[str] = None

    @property
    def items(self) -> Tuple[T, ...]:
        return self._items

    @property
    def dropdown(self) -> Dict[str, str]:
        """Strategy key -> label, in registration order."""
        return {key: option.label for key, option in self._options.items()}

    @property
    def result(self) -> SortResult:
        return self._sort_by(self.option)

    def _sort_by(self, option: str) -> SortResult:
        """Apply a strategy to a fresh copy of the items."""
        return self._options[option].sort(list(self._items))

    @property
    def anchor(self) -> str:
        return make_anchor(self.option, self.group)

    def anchor_for(self, group: Optional[str] = None) -> str:
        return make_anchor(self.option, group)

    def anchors(self) -> List[str]:
        """Anchors for every group of the active strategy; empty for a flat result."""
        result = self.result
        if not is_grouped(result):
            return []
        return [self.anchor_for(group) for group in result]

    def update(self, option: str, group: Optional[str] = None) -> SelectionResult:
        """
        Select a strategy and, optionally, one of its groups.

        An unregistered strategy leaves the view unchanged and reports
        STRATEGY_NOT_FOUND. A group key that the strategy does not produce
        is dropped, leaving the strategy selected without a group.
        """
        if option not in self._options:
            logger.warning(f"Sort option '{option}' is not registered; keeping '{self.option}'")
            return {
                "applied": False,
                "error_code": GroupingError.STRATEGY_NOT_FOUND.value,
                "reason": f"Sort option '{option}' is not registered. Available options: {list(self._options)}",
                "option": self.option,
                "group": self.group
            }

        if group is not None:
            result = self._sort_by(option)
            if not is_grouped(result) or group not in result:
                logger.info(f"Group '{group}' not produced by sort option '{option}'; ignoring it")
                group = None

        self.option = option
        self.group = group
        logger.debug(f"Sort option set to '{self.anchor}'")
        return {
            "applied": True,
            "error_code": None,
            "reason": None,
            "option": self.option,
            "group": self.group
        }

    def from_anchor(self, anchor: str) -> SelectionResult:
        """Restore the selection from an anchor token such as 'broadcast:2021'."""
        option, group = parse_anchor(anchor)
        return self.update(option, group)
