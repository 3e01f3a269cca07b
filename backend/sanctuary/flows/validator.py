# /sanctuary/flows/validator.py

"""
Structural validation for guidance flow trees.

Validation is a gate, not a transform: validate_flow() returns the very same
root object it was given, or raises StructuralDefect naming the offending
node by the option names leading to it from the root.

All functions are:
- Pure (no side effects)
- Deterministic (same input = same output)
- No logging
- No state mutation
"""

from typing import List, Optional, Set, Tuple, TypedDict

from sanctuary.errors import FlowErrorCode, StructuralDefect
from sanctuary.models.flow import FlowNode


class ValidationResult(TypedDict):
    """Result of a validation check."""
    is_valid: bool
    error_code: Optional[str]
    message: Optional[str]
    path: Tuple[str, ...]


def _check_node(node: FlowNode, path: Tuple[str, ...]) -> None:
    """Check the rules that concern a single node and its direct options."""
    if not node.prompt:
        raise StructuralDefect(FlowErrorCode.EMPTY_PROMPT, "Prompt cannot be empty", path)

    for index, line in enumerate(node.prompt):
        if not line or not line.strip():
            raise StructuralDefect(
                FlowErrorCode.EMPTY_PROMPT_LINE,
                f"Prompt line {index} is blank",
                path
            )

    if node.options is None:
        return

    # An explicit empty list is ambiguous; terminal nodes must omit options
    if len(node.options) == 0:
        raise StructuralDefect(
            FlowErrorCode.EMPTY_OPTIONS,
            "Options are present but empty; omit options for a terminal node",
            path
        )

    seen: Set[str] = set()
    for option in node.options:
        if option.name in seen:
            raise StructuralDefect(
                FlowErrorCode.DUPLICATE_OPTION,
                f"Option '{option.name}' appears more than once",
                path
            )
        seen.add(option.name)


def validate_flow(root: FlowNode, max_depth: Optional[int] = None) -> FlowNode:
    """
    Validate a flow tree before it is used by a navigator.

    Walks the tree depth-first, tracking the identities of the nodes on the
    current root-to-leaf path so that a node reachable from itself is
    reported as a cycle rather than recursing forever.

    Args:
        root: The root node of the tree
        max_depth: Optional maximum number of option selections from the root.
            No limit is applied when omitted.

    Returns:
        The root node, unchanged

    Raises:
        StructuralDefect: on the first defect found, in depth-first order
    """
    on_path: Set[int] = set()
    # Explicit stack: (node, path, entering); exit markers release the node from on_path
    stack: List[Tuple[FlowNode, Tuple[str, ...], bool]] = [(root, (), True)]

    while stack:
        node, path, entering = stack.pop()
        if not entering:
            on_path.discard(id(node))
            continue

        if id(node) in on_path:
            raise StructuralDefect(
                FlowErrorCode.CYCLE_DETECTED,
                "Node is reachable from itself",
                path
            )

        if max_depth is not None and len(path) > max_depth:
            raise StructuralDefect(
                FlowErrorCode.MAX_DEPTH_EXCEEDED,
                f"Depth {len(path)} exceeds the maximum of {max_depth}",
                path
            )

        _check_node(node, path)

        on_path.add(id(node))
        stack.append((node, path, False))
        # Reversed so that siblings are visited in declaration order
        for option in reversed(node.options or ()):
            stack.append((option.flow, path + (option.name,), True))

    return root


def check_flow(root: FlowNode, max_depth: Optional[int] = None) -> ValidationResult:
    """
    Non-raising variant of validate_flow().

    Returns:
        ValidationResult with is_valid=True if the tree is sound, False otherwise
    """
    try:
        validate_flow(root, max_depth=max_depth)
    except StructuralDefect as defect:
        return {
            "is_valid": False,
            "error_code": defect.error_code.value,
            "message": defect.message,
            "path": defect.path
        }

    return {
        "is_valid": True,
        "error_code": None,
        "message": None,
        "path": ()
    }
