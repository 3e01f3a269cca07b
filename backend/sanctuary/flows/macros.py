# /sanctuary/flows/macros.py

"""
Reusable prose for guidance flow prompts.

Each macro is a pure function returning a fresh list of lines, so the same
advice can be shared across many terminal nodes without copying text.
Outputs are spliced into a node's prompt with compose().

All functions are:
- Pure (no side effects)
- Deterministic (same input = same output)
- Safe for any string input, including empty strings
"""

from typing import Iterable, List, Union

PromptPart = Union[str, Iterable[str]]


def rehab(animal: str = "it", context: str = "") -> List[str]:
    """
    Advice to contact a wildlife rehabilitator.

    Args:
        animal: Subject of the advice, e.g. "an injured bird". Defaults to "it".
        context: Optional condition prefixed to the first line, e.g.
            "If the parents do not return". When given, the first line reads
            "{context}, call ..." instead of "Call ...".
    """
    lead = f"{context}, call" if context else "Call"
    return [
        f"{lead} a wildlife rehabilitator. They will be able to help {animal}, or give you advice on what to do next.",
        "To find a local wildlife rehabilitator, you can try searching online, or contacting your region's wildlife agency, or a local veterinarian.",
    ]


def leave(animal: str = "it") -> List[str]:
    """Advice to leave the animal alone and observe from a distance."""
    return [
        f"Leave {animal} alone and keep yourself, and any pets, away from it.",
        f"If you are still concerned, you can monitor {animal} from a distance to make sure it is doing okay over a few days.",
        f"Do not feed or otherwise interfere with it, to avoid {animal} becoming dependent on humans.",
    ]


def compose(*parts: PromptPart) -> List[str]:
    """
    Splice literal lines and macro outputs into a single prompt.

    Strings are taken as single lines; any other iterable is expanded in place.
    Ordering of parts and of lines within each part is preserved.
    """
    lines: List[str] = []
    for part in parts:
        if isinstance(part, str):
            lines.append(part)
        else:
            lines.extend(part)
    return lines
