# /sanctuary/models/flow.py

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class NodeKind(str, Enum):
    """Shape of a flow node, derived from whether it offers options."""
    BRANCHING = "branching"
    TERMINAL = "terminal"


class FlowOption(BaseModel):
    """A named branch leading to a child node owned by this option."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Short label shown to the user, e.g. 'Yes' or 'Bird'")
    flow: FlowNode = Field(..., description="Child node reached by selecting this option")


class FlowNode(BaseModel):
    """
    One step of a guidance dialogue.

    This is a PURE DATA model with no methods or logic. Structural rules
    (non-empty prompt, distinct sibling names, acyclic) are enforced by
    sanctuary.flows.validator so that defects are reported with their
    location in the tree.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    prompt: Tuple[str, ...] = Field(..., description="Lines shown together as one step")
    options: Optional[Tuple[FlowOption, ...]] = Field(
        default=None,
        description="Branches from this node; absent for a terminal node"
    )


FlowOption.model_rebuild()
