"""Headless seating layout checker - CLI entry point.

Reads a seating layout JSON file, prints each table's rotated bounding box
and whether it fits on the canvas. With --clamp, prints the layout JSON with
every table center pulled back onto the canvas instead.

Usage:
    python editor/src/headless.py <layout_file> [--clamp] [-c CONFIG] [-v]

Examples:
    python editor/src/headless.py layouts/main_hall.json
    python editor/src/headless.py layouts/main_hall.json --clamp > fixed.json

Exit status: 0 when every table fits (or --clamp was given), 2 when any
table is out of bounds, 1 on input errors.
"""

import sys
import os
import argparse
import json
import logging

# Add editor/src to path so imports work
_src_dir = os.path.dirname(os.path.abspath(__file__))
if _src_dir not in sys.path:
    sys.path.insert(0, _src_dir)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_OUT_OF_BOUNDS = 2


def _load_layout(file_path: str, grid_size: float):
    """Read and validate a layout file.

    Args:
        file_path: Path to a JSON file of the form {"resources": [...]}
        grid_size: Grid size for the loaded layout

    Returns:
        SeatingLayout

    Raises:
        ValueError: On malformed JSON or invalid resource entries
    """
    from models.seating_layout import SeatingLayout

    with open(file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict) or not isinstance(data.get('resources'), list):
        raise ValueError("Layout must be a JSON object with a 'resources' list")

    return SeatingLayout.from_dict(data, grid_size=grid_size)


def _format_box(box) -> str:
    return f"({box.min_x:.2f}, {box.min_y:.2f}) - ({box.max_x:.2f}, {box.max_y:.2f})"


def check_layout(layout) -> bool:
    """Print each table's bounding box. Returns True if every table fits."""
    from utils.bounding import get_rotated_bounding_box

    all_fit = True
    for resource_id in layout.resource_ids:
        resource = layout.get_resource(resource_id)
        box = get_rotated_bounding_box(resource.bounds)
        fits = box.fits_within()
        all_fit = all_fit and fits
        status = "ok" if fits else "OUT OF BOUNDS"
        print(f"  {resource.name} [{resource_id}]: {_format_box(box)} {status}")
    return all_fit


def clamp_layout(layout) -> int:
    """Move every table center onto the canvas. Returns the number moved."""
    from utils.clamping import clamp_center_to_canvas

    moved = 0
    for resource_id in layout.resource_ids:
        resource = layout.get_resource(resource_id)
        center = clamp_center_to_canvas(resource.bounds)
        if (center.x, center.y) != (resource.center_x, resource.center_y):
            layout.update_resource(resource_id, center_x=center.x, center_y=center.y)
            moved += 1
    return moved


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Check that every table of a seating layout fits on the canvas.',
    )
    parser.add_argument(
        'layout_file',
        help='Path to a seating layout JSON file.',
    )
    parser.add_argument(
        '--clamp',
        action='store_true',
        help='Print the layout with every table center clamped onto the canvas.',
    )
    parser.add_argument(
        '-c', '--config',
        default=None,
        help='Editor config file (default: ~/.seating_builder/config.json).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    args = parser.parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    from models.editor_settings import load_settings

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError, TypeError) as e:
        print(f"Error: Invalid config: {e}")
        sys.exit(EXIT_INPUT_ERROR)

    input_path = os.path.abspath(args.layout_file)
    if not os.path.isfile(input_path):
        print(f"Error: Layout file not found: {input_path}")
        sys.exit(EXIT_INPUT_ERROR)

    try:
        layout = _load_layout(input_path, settings.grid_size)
    except (OSError, ValueError) as e:
        print(f"Error: Invalid layout {input_path}: {e}")
        sys.exit(EXIT_INPUT_ERROR)

    if args.clamp:
        moved = clamp_layout(layout)
        logging.getLogger('headless').debug(f"Clamped {moved} table(s)")
        print(json.dumps(layout.to_dict(), indent=2))
        sys.exit(EXIT_OK)

    print(f"Checking {len(layout)} table(s) in {input_path} ...")
    if check_layout(layout):
        print("All tables fit on the canvas.")
        sys.exit(EXIT_OK)

    print("Some tables are out of bounds.")
    sys.exit(EXIT_OUT_OF_BOUNDS)


if __name__ == '__main__':
    main()
