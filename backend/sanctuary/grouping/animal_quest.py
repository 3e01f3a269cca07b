# /sanctuary/grouping/animal_quest.py

"""
Sort options for the Animal Quest episode list.

- all: every episode, newest first
- classification: grouped by the featured ambassador's class
- broadcast: grouped by broadcast year (UTC), newest first
"""

import logging
from datetime import timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sanctuary.config.settings import settings
from sanctuary.grouping.classification import classification_sort_key, get_classification
from sanctuary.grouping.engine import GroupedView, group_items
from sanctuary.models.episode import Episode
from sanctuary.models.grouping import GroupedItems, SortOption
from sanctuary.utils.slugs import convert_to_slug

logger = logging.getLogger(__name__)


def number_episodes(raw: Sequence[Mapping[str, Any]]) -> List[Episode]:
    """
    Number raw episode records 1..n in broadcast order, newest first.

    Records are given oldest first, as they are published.
    """
    episodes = [Episode(**{**record, "episode": index + 1}) for index, record in enumerate(raw)]
    episodes.reverse()
    return episodes


def _broadcast_year(episode: Episode) -> str:
    broadcast = episode.broadcast
    if broadcast.tzinfo is not None:
        broadcast = broadcast.astimezone(timezone.utc)
    return str(broadcast.year)


def sort_all(episodes: List[Episode]) -> List[Episode]:
    return episodes


def sort_by_classification(episodes: List[Episode]) -> GroupedItems:
    ordered = sorted(
        episodes,
        key=lambda e: (classification_sort_key(e.classification), -e.episode)
    )
    return group_items(
        ordered,
        key=lambda e: convert_to_slug(get_classification(e.classification)),
        label=lambda e: get_classification(e.classification)
    )


def sort_by_broadcast(episodes: List[Episode]) -> GroupedItems:
    # Episode number breaks ties between identical broadcast times
    ordered = sorted(episodes, key=lambda e: (e.broadcast.timestamp(), e.episode), reverse=True)
    return group_items(ordered, key=_broadcast_year, label=_broadcast_year)


SORT_OPTIONS: Dict[str, SortOption[Episode]] = {
    "all": SortOption(label="All Episodes", sort=sort_all),
    "classification": SortOption(label="Ambassador Classification", sort=sort_by_classification),
    "broadcast": SortOption(label="Broadcast Date", sort=sort_by_broadcast),
}


def episode_view(episodes: Sequence[Episode], initial: Optional[str] = None) -> GroupedView[Episode]:
    """
    Grouped view over episodes, starting on `initial` or the configured default.

    Falls back to 'all' if the configured default is not a registered option.
    """
    initial = initial or settings.default_sort_option
    if initial not in SORT_OPTIONS:
        logger.warning(f"Sort option '{initial}' is not registered; falling back to 'all'")
        initial = "all"
    return GroupedView(episodes, SORT_OPTIONS, initial=initial)
