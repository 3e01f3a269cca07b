# /sanctuary/grouping/classification.py

from typing import Dict, Optional, Tuple

# Display order for ambassador classes
CLASSIFICATIONS: Dict[str, str] = {
    "mammalia": "Mammals",
    "aves": "Birds",
    "reptilia": "Reptiles",
    "amphibia": "Amphibians",
    "actinopterygii": "Fish",
    "arachnida": "Arachnids",
    "insecta": "Insects",
    "chilopoda": "Centipedes",
    "diplopoda": "Millipedes",
    "gastropoda": "Gastropods",
    "malacostraca": "Crustaceans",
}

OTHER_CLASSIFICATION = "Other"

_ORDER = {key: index for index, key in enumerate(CLASSIFICATIONS)}


def get_classification(key: Optional[str]) -> str:
    """Display label for a class key; unknown or missing keys are 'Other'."""
    return CLASSIFICATIONS.get(key or "", OTHER_CLASSIFICATION)


def classification_sort_key(key: Optional[str]) -> Tuple[int, str]:
    """Sort key placing known classes in display order and anything else last."""
    return (_ORDER.get(key or "", len(_ORDER)), key or "")
