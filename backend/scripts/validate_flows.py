#!/usr/bin/env python3
"""
Validate guidance flows before they ship.

This script:
1. Loads every flow registered in sanctuary/flows/definitions.py
2. Loads any JSON flow files given on the command line
3. Checks each one against the structural rules (non-empty prompts,
   distinct option names, no empty option lists, no cycles, depth limit)
4. Exits non-zero if any flow is defective

Usage:
    python scripts/validate_flows.py
    python scripts/validate_flows.py path/to/flow.json --max-depth 12
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Add parent directory to path to import sanctuary modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from sanctuary.errors import StructuralDefect
from sanctuary.flows.definitions import FLOWS
from sanctuary.flows.loader import load_flow, load_flow_file
from sanctuary.models.flow import FlowNode
from sanctuary.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def count_nodes(root: FlowNode) -> int:
    return 1 + sum(count_nodes(option.flow) for option in root.options or ())


def validate_all(files: List[str], max_depth: Optional[int] = None) -> int:
    """Validate registered flows and the given files; return the number of defective flows."""
    failures = 0

    targets = [(f"registry:{key}", lambda data=data: load_flow(data, max_depth=max_depth)) for key, data in FLOWS.items()]
    targets += [(path, lambda path=path: load_flow_file(path, max_depth=max_depth)) for path in files]

    for name, load in targets:
        try:
            root = load()
        except StructuralDefect as defect:
            failures += 1
            logger.error(f"✗ {name}: {defect}")
            continue
        except OSError as e:
            failures += 1
            logger.error(f"✗ {name}: cannot read file ({e})")
            continue
        logger.info(f"✓ {name}: {count_nodes(root)} nodes")

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Validate guidance flow trees")
    parser.add_argument("files", nargs="*", help="JSON flow files to validate")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum number of selections from the root")
    args = parser.parse_args(argv)

    setup_logging()
    failures = validate_all(args.files, max_depth=args.max_depth)
    if failures:
        logger.error(f"{failures} flow(s) failed validation")
        return 1

    logger.info("All flows are valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
