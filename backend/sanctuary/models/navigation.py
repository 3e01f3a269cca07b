# /sanctuary/models/navigation.py

from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field

from sanctuary.models.flow import FlowNode


class NavigationState(BaseModel):
    """
    Navigation state for one guidance session.

    This is a PURE DATA model. Node fields are views into a static, validated
    tree, never copies. Transitions in sanctuary.flows.engine return a new
    state instead of mutating this one.
    """
    model_config = ConfigDict(frozen=True)

    root: FlowNode = Field(..., description="Root of the tree being navigated")
    current: FlowNode = Field(..., description="Node currently displayed")
    history: Tuple[FlowNode, ...] = Field(default=(), description="Previously visited nodes, most recent last")
    path: Tuple[str, ...] = Field(default=(), description="Option names selected from the root to current")
