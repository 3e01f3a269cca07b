# /sanctuary/flows/loader.py

"""
Load guidance flows from their serialized form.

The serialized form is a nested mapping:

    {"prompt": ["..."], "options": [{"name": "Yes", "flow": {...}}, ...]}

Terminal nodes omit "options". Every loaded tree is validated before it is
returned, so a malformed tree fails here and never reaches a session.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from sanctuary.config.settings import settings
from sanctuary.errors import FlowErrorCode, FlowNotFound, StructuralDefect
from sanctuary.flows.definitions import FLOWS
from sanctuary.flows.validator import validate_flow
from sanctuary.models.flow import FlowNode

logger = logging.getLogger(__name__)


def _path_from_loc(data: Any, loc: Tuple[Union[int, str], ...]) -> Tuple[str, ...]:
    """
    Translate a pydantic error location into option names.

    ('options', 1, 'flow', 'prompt') becomes ('No',) when the second option
    is named "No". Unnamed options are shown by position, e.g. '#1'.
    """
    path: List[str] = []
    current = data
    items = list(loc)
    while len(items) >= 2 and items[0] == "options" and isinstance(items[1], int):
        index = items[1]
        try:
            option = current["options"][index]
        except (KeyError, IndexError, TypeError):
            path.append(f"#{index}")
            break
        name = option.get("name") if isinstance(option, Mapping) else None
        path.append(name if isinstance(name, str) else f"#{index}")
        if len(items) < 3 or items[2] != "flow":
            break
        current = option.get("flow") if isinstance(option, Mapping) else None
        items = items[3:]
    return tuple(path)


def _null_options_path(data: Mapping[str, Any]) -> Optional[Tuple[str, ...]]:
    """
    Path of the first node whose "options" key is present but null.

    The model reads a null like an absent key, so this check runs on the raw
    data once it has parsed cleanly.
    """
    stack: List[Tuple[Mapping[str, Any], Tuple[str, ...]]] = [(data, ())]
    while stack:
        node, path = stack.pop()
        if "options" not in node:
            continue
        if node["options"] is None:
            return path
        for option in reversed(node["options"]):
            stack.append((option["flow"], path + (option["name"],)))
    return None


def load_flow(data: Mapping[str, Any], max_depth: Optional[int] = None) -> FlowNode:
    """
    Build and validate a flow tree from its serialized form.

    Args:
        data: Nested mapping with "prompt" and optional "options"
        max_depth: Overrides settings.flow_max_depth when given

    Raises:
        StructuralDefect: if the data cannot be parsed or breaks an invariant
    """
    try:
        root = FlowNode.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        raise StructuralDefect(
            FlowErrorCode.MALFORMED_FLOW,
            f"{first['msg']} ({'.'.join(str(part) for part in first['loc'])})",
            _path_from_loc(data, tuple(first["loc"]))
        ) from e

    null_path = _null_options_path(data)
    if null_path is not None:
        raise StructuralDefect(
            FlowErrorCode.EMPTY_OPTIONS,
            "Options are null; omit options for a terminal node",
            null_path
        )

    limit = max_depth if max_depth is not None else settings.flow_max_depth
    return validate_flow(root, max_depth=limit)


def load_flow_file(path: Union[str, Path], max_depth: Optional[int] = None) -> FlowNode:
    """Load and validate a flow tree stored as a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise StructuralDefect(
            FlowErrorCode.MALFORMED_FLOW,
            f"{path.name} is not valid JSON: {e.msg} (line {e.lineno})"
        ) from e

    if not isinstance(data, dict):
        raise StructuralDefect(
            FlowErrorCode.MALFORMED_FLOW,
            f"{path.name} must contain a JSON object at the top level"
        )

    root = load_flow(data, max_depth=max_depth)
    logger.info(f"Loaded flow from {path}")
    return root


def dump_flow(root: FlowNode) -> Dict[str, Any]:
    """Serialize a flow tree back to its nested mapping form."""
    return root.model_dump(mode="json", exclude_none=True)


@lru_cache(maxsize=None)
def get_flow(key: str) -> FlowNode:
    """
    Return a registered flow, loading and validating it on first use.

    Raises:
        FlowNotFound: if no flow is registered under the key
        StructuralDefect: if the registered flow is malformed
    """
    if key not in FLOWS:
        raise FlowNotFound(key, known=sorted(FLOWS))

    try:
        root = load_flow(FLOWS[key])
    except StructuralDefect as defect:
        logger.error(f"Registered flow '{key}' is malformed: {defect}")
        raise

    logger.info(f"Loaded registered flow '{key}'")
    return root
