# /sanctuary/flows/definitions.py

"""
Guidance flow definitions.

This module defines flows in their serialized form as pure data (no logic).
Each flow is a nested mapping:
- prompt: list of lines shown together as one step
- options: list of {"name", "flow"} branches (omitted on terminal steps)

Flows are validated by sanctuary.flows.loader before use.
"""

from typing import Any, Dict

from sanctuary.flows.macros import compose, leave, rehab

# Type definition for a serialized flow node
FlowDefinition = Dict[str, Any]

PARENTS_NOT_RETURNING = "If you are sure the parents are not nearby, and do not return within a few hours"
DO_NOT_HANDLE_DEER = "Do not approach or try to handle the deer, as this may scare it and lead to further injury."


def _bird() -> FlowDefinition:
    return {
        "prompt": [
            "Is the bird injured?",
            "For example, does it look like it may have been attacked, is it bleeding, does it appear malnourished, or a wing is drooping?",
        ],
        "options": [
            {"name": "Yes", "flow": {"prompt": rehab("an injured bird")}},
            {
                "name": "No",
                "flow": {
                    "prompt": ["Does the bird have feathers?"],
                    "options": [
                        {
                            "name": "Yes",
                            "flow": {
                                "prompt": [
                                    "The bird you've found is likely a fledgling.",
                                    "It is normal for it to be on the ground, it has likely left the nest recently. The parents should still be looking after it and feeding it.",
                                    "Is the bird safe from pets (dogs, cats, etc.) and people?",
                                ],
                                "options": [
                                    {"name": "Yes", "flow": {"prompt": leave("the bird")}},
                                    {
                                        "name": "No",
                                        "flow": {
                                            "prompt": [
                                                "Carefully move the bird to a safe location nearby, such as a bush or tree.",
                                                "Once moved, leave the bird alone, keeping yourself and any pets away from it, and observe from a distance.",
                                                "Are the parents still nearby?",
                                            ],
                                            "options": [
                                                {"name": "Yes", "flow": {"prompt": leave("the bird")}},
                                                {"name": "No", "flow": {"prompt": rehab("the bird", PARENTS_NOT_RETURNING)}},
                                            ],
                                        },
                                    },
                                ],
                            },
                        },
                        {
                            "name": "No",
                            "flow": {
                                "prompt": [
                                    "The bird you've found is likely a nestling. It shouldn't be on the ground yet!",
                                    "Can you locate the nest, and is it intact and safe to return the bird to?",
                                ],
                                "options": [
                                    {
                                        "name": "Yes",
                                        "flow": {
                                            "prompt": [
                                                "Carefully return the bird to the nest.",
                                                "Once returned, leave the bird alone, keeping yourself and any pets away from it, and observe from a distance.",
                                                "Are the parents still nearby? Are they visiting the nest and showing interest in the bird?",
                                            ],
                                            "options": [
                                                {"name": "Yes", "flow": {"prompt": leave("the bird")}},
                                                {"name": "No", "flow": {"prompt": rehab("the bird", PARENTS_NOT_RETURNING)}},
                                            ],
                                        },
                                    },
                                    {
                                        "name": "No",
                                        "flow": {
                                            "prompt": rehab(
                                                "the bird",
                                                "If you cannot locate a suitable nest, and if you are sure the parents are not nearby, and do not return within a few hours",
                                            ),
                                        },
                                    },
                                ],
                            },
                        },
                    ],
                },
            },
        ],
    }


def _deer() -> FlowDefinition:
    return {
        "prompt": [
            "Is the deer injured?",
            "For example, does it look like it may have been attacked, is it bleeding, is it unable to walk?",
        ],
        "options": [
            {"name": "Yes", "flow": {"prompt": compose(DO_NOT_HANDLE_DEER, rehab("an injured deer"))}},
            {
                "name": "No",
                "flow": {
                    "prompt": [
                        "Is the deer trapped or stuck?",
                        "For example, is it stuck in a fence, or in a hole?",
                    ],
                    "options": [
                        {"name": "Yes", "flow": {"prompt": compose(DO_NOT_HANDLE_DEER, rehab("a trapped deer"))}},
                        {
                            "name": "No",
                            "flow": {
                                "prompt": ["Is the deer alone?"],
                                "options": [
                                    {
                                        "name": "Yes",
                                        "flow": {
                                            "prompt": compose(
                                                "This is normal, do not worry. Younger deer (fawns) are often left alone for long periods of time. The mother should return to feed them, often toward the end of the day.",
                                                "If you are still concerned, you can monitor the deer from a distance to make sure the mother is still caring for it. Do not approach or try to handle the deer, as your scent may lead to the mother abandoning it.",
                                                rehab("a deer", "If you don't see the mother return over the next couple of days"),
                                            ),
                                        },
                                    },
                                    {"name": "No", "flow": {"prompt": leave("the deer")}},
                                ],
                            },
                        },
                    ],
                },
            },
        ],
    }


def _cat() -> FlowDefinition:
    return {
        "prompt": [
            "Does the cat appear to be sick, injured, in danger, or a nursing kitten with no mama in sight?",
            "For example, is the cat is lying down and will not get up, is limping, or has blood anywhere on their body.",
        ],
        "options": [
            {"name": "Yes", "flow": {"prompt": rehab("the cat")}},
            {
                "name": "No",
                "flow": {
                    "prompt": ["Has the cat been outside for over 24 hours?"],
                    "options": [
                        {
                            "name": "Yes",
                            "flow": {
                                "prompt": compose(
                                    "Check for a collar, if the cat has one try and get in contact with the owner. If the cat has no collar, you can take the cat to the nearest animal shelter to check for a microchip.",
                                    "If the cat does not have a microchip, leave the cat where it is. You can attempt to locate the owner by asking neighbours, or leaving out flyers with photos and detailed information about the cat.",
                                    rehab("the cat", "If the cat appears to be feral/unowned"),
                                ),
                            },
                        },
                        {"name": "No", "flow": {"prompt": leave("the cat")}},
                    ],
                },
            },
        ],
    }


def _squirrel() -> FlowDefinition:
    return {
        "prompt": [
            "Does any of the following apply to the squirrel?",
            "- It is bleeding, has an open wound, or has a broken bone.",
            "- It has been in a cat's or dog's mouth.",
            "- It is covered in fly eggs (looks like small grains of rice).",
            "- It is cold, wet, or crying nonstop.",
        ],
        "options": [
            {"name": "Yes", "flow": {"prompt": rehab("the squirrel")}},
            {
                "name": "No",
                "flow": {
                    "prompt": [
                        "Does the squirrel have a fluffed-out tail, a body longer than 6 inches (excluding the tail), or is approaching humans/pets?",
                    ],
                    "options": [
                        {
                            "name": "Yes",
                            "flow": {
                                "prompt": compose(
                                    "This is likely a juvenile squirrel, you do not need to intervene.",
                                    leave("the squirrel"),
                                ),
                            },
                        },
                        {
                            "name": "No",
                            "flow": {
                                "prompt": ["Is the squirrel alone?"],
                                "options": [
                                    {"name": "Yes", "flow": {"prompt": rehab("the squirrel", PARENTS_NOT_RETURNING)}},
                                    {"name": "No", "flow": {"prompt": leave("the squirrel")}},
                                ],
                            },
                        },
                    ],
                },
            },
        ],
    }


def _raccoon() -> FlowDefinition:
    return {
        "prompt": ["Does the raccoon appear to be sick or injured?"],
        "options": [
            {"name": "Yes", "flow": {"prompt": rehab("the raccoon")}},
            {
                "name": "No",
                "flow": {
                    "prompt": ["Have you found a baby raccoon that's alone with no mother in sight?"],
                    "options": [
                        {
                            "name": "Yes",
                            "flow": {
                                "prompt": compose(
                                    "Be careful not to create an orphan raccoon accidentally. When a baby raccoon is separated from its mother, it will stay where it is until the mother returns.",
                                    "Monitor the baby from a distance to make sure the mother is still caring for it. Do not attempt to feed or otherwise care for the baby, as this may lead to it becoming dependent on humans.",
                                    rehab("the baby raccoon", "If the mother does return after 24 hours"),
                                ),
                            },
                        },
                        {"name": "No", "flow": {"prompt": leave("the raccoon")}},
                    ],
                },
            },
        ],
    }


FOUND_ANIMAL: FlowDefinition = {
    "prompt": ["What animal have you found in distress?"],
    "options": [
        {"name": "Bird", "flow": _bird()},
        {"name": "Deer/Fawn", "flow": _deer()},
        {"name": "Cat", "flow": _cat()},
        {"name": "Squirrel", "flow": _squirrel()},
        {"name": "Raccoon", "flow": _raccoon()},
    ],
}

FLOWS: Dict[str, FlowDefinition] = {
    "found_animal": FOUND_ANIMAL,
}
