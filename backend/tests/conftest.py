import pytest
from datetime import datetime, timezone

from sanctuary.flows.loader import get_flow, load_flow
from sanctuary.flows.navigator import FlowNavigator
from sanctuary.models.episode import Episode


@pytest.fixture(autouse=True)
def clear_flow_cache():
    """Registered flows are cached per process; start every test from a clean cache."""
    get_flow.cache_clear()
    yield
    get_flow.cache_clear()


@pytest.fixture
def found_animal():
    return get_flow("found_animal")


@pytest.fixture
def navigator():
    return FlowNavigator.for_flow("found_animal")


@pytest.fixture
def small_flow():
    """
    A three-level tree:
        root -> A -> A1 (terminal)
                  -> A2 (terminal)
             -> B (terminal)
    """
    return load_flow({
        "prompt": ["Root?"],
        "options": [
            {
                "name": "A",
                "flow": {
                    "prompt": ["A?"],
                    "options": [
                        {"name": "A1", "flow": {"prompt": ["End A1"]}},
                        {"name": "A2", "flow": {"prompt": ["End A2"]}},
                    ],
                },
            },
            {"name": "B", "flow": {"prompt": ["End B"]}},
        ],
    })


def make_episode(number, year, month=1, classification="mammalia", edition=None):
    return Episode(
        episode=number,
        edition=edition or f"Episode {number} Edition",
        broadcast=datetime(year, month, 15, 18, 0, tzinfo=timezone.utc),
        featured=["ambassador"],
        classification=classification,
    )


@pytest.fixture
def episodes():
    """Five episodes, newest first, spanning three classes and three years."""
    return [
        make_episode(5, 2023, 3, "aves"),
        make_episode(4, 2022, 11, "mammalia"),
        make_episode(3, 2022, 2, "reptilia"),
        make_episode(2, 2021, 9, "aves"),
        make_episode(1, 2021, 1, "mammalia"),
    ]


@pytest.fixture
def episode_factory():
    return make_episode
