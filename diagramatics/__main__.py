import argparse
import json
import logging
from typing import Optional, Sequence

from diagramatics import diagram as diagram_module
from diagramatics import path as path_module
from diagramatics.demo import SCENES
from diagramatics.logging_utils import trace_modules
from diagramatics.printer import format_bounding_box, format_tree
from diagramatics.types import GeometryError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Build and inspect demo diagrams")
    parser.add_argument(
        "--scene",
        choices=sorted(SCENES),
        default="locator",
        help="Demo scene to build (default: locator)",
    )
    parser.add_argument(
        "--flatten",
        action="store_true",
        help="Flatten the scene to a single level of leaves before printing",
    )
    parser.add_argument(
        "--tag",
        action="append",
        default=None,
        help="Only print nodes holding this tag (repeatable)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the structural dict of the scene instead of the outline",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every diagram/path call at DEBUG level",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    if args.trace:
        trace_modules([diagram_module, path_module], skip=["DiagramType"])

    logger.info("Building scene %s", args.scene)
    try:
        scene = SCENES[args.scene]()
        if args.flatten:
            scene = scene.flatten()
        if args.json:
            print(json.dumps(scene.to_dict(), indent=2))
            return
        print(format_tree(scene, tags=args.tag), end="")
        print(format_bounding_box(scene))
    except GeometryError as exc:
        logger.error("Scene %s failed: %s", args.scene, exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
