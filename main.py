#!/usr/bin/env python3
"""
Touch Driver CLI - resolve touch positions into absolute screen coordinates.

Usage:
    python main.py X Y [OPTIONS]

Environment Variables:
    TOUCH_DRIVER_DEVICE_TYPE: Display backend, adb | u2 | static (default: adb)
    TOUCH_DRIVER_DEVICE_ID: ADB device ID for multi-device setups
    TOUCH_DRIVER_ADB_PATH: Path to the adb executable (default: adb)
    TOUCH_DRIVER_QUERY_TIMEOUT: Display size query timeout in seconds (default: 5)
    TOUCH_DRIVER_LOG_LEVEL: Logging level (default: INFO)
"""

import argparse
import logging
import sys

from touch_driver import (
    ZERO_POINT,
    DisplayQueryError,
    InvalidCoordinatesError,
    Point,
    Rect,
    get_absolute_position,
    get_element_abs_pos,
)
from touch_driver.config import DriverConfig
from touch_driver.display_factory import DeviceType, set_device_type
from utils.config import load_config
from utils.util import print_with_color

logger = logging.getLogger(__name__)


def _int_list(value: str, count: int, name: str) -> list[int]:
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != count:
        raise argparse.ArgumentTypeError(f"{name} needs {count} comma-separated values")
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"{name} values must be integers: {value}")


def rect_arg(value: str) -> Rect:
    """Parse L,T,R,B into a Rect."""
    return Rect(*_int_list(value, 4, "rect"))


def bounds_arg(value: str) -> Rect:
    """Parse a "[l,t][r,b]" bounds string into a Rect."""
    try:
        return Rect.from_bounds_string(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def offset_arg(value: str) -> Point:
    """Parse DX,DY into a Point."""
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("offset needs 2 comma-separated values")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError:
        raise argparse.ArgumentTypeError(f"offset values must be numbers: {value}")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Touch Driver - resolve touch positions into screen coordinates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Centre of the connected device's display
    python main.py 0.5 0.5

    # Fraction of an explicit rectangle, with bounds checking
    python main.py 0.5 0.5 --rect 0,0,100,200 --check-bounds

    # Point inside a UI element, using its hierarchy bounds
    python main.py 0.25 0.5 --bounds "[0,63][1080,210]"

    # Use a specific device through uiautomator2
    python main.py 0.5 0.9 --device-type u2 --device-id emulator-5554
        """,
    )

    parser.add_argument("x", type=float, help="X position (fraction or pixels)")
    parser.add_argument("y", type=float, help="Y position (fraction or pixels)")

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--rect",
        type=rect_arg,
        metavar="L,T,R,B",
        help="Resolve against this rectangle",
    )
    target.add_argument(
        "--bounds",
        type=bounds_arg,
        metavar="BOUNDS",
        help='Resolve inside an element with bounds like "[0,63][1080,210]"',
    )
    target.add_argument(
        "--device",
        action="store_true",
        help="Resolve against the device display (default)",
    )

    parser.add_argument(
        "--offset",
        type=offset_arg,
        default=None,
        metavar="DX,DY",
        help="Offset added to the point (with --rect)",
    )

    parser.add_argument(
        "--check-bounds",
        action="store_true",
        help="Fail if the point is outside the rectangle (with --rect)",
    )

    parser.add_argument(
        "--device-type",
        type=str,
        choices=[t.value for t in DeviceType],
        default=None,
        help="Display backend for device-relative positions",
    )

    parser.add_argument(
        "--device-id",
        "-d",
        type=str,
        default=None,
        help="ADB device ID",
    )

    parser.add_argument(
        "--config",
        type=str,
        default="./config.yaml",
        help="YAML config file (default: ./config.yaml)",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    if args.rect is None:
        if args.offset is not None:
            parser.error("--offset can only be used with --rect")
        if args.check_bounds:
            parser.error(
                "--check-bounds can only be used with --rect; "
                "--bounds and device positions are always checked"
            )
    elif args.offset is None:
        args.offset = ZERO_POINT

    return args


def resolve(args: argparse.Namespace, config: DriverConfig) -> Point:
    """Resolve the requested point according to the parsed arguments."""
    point = Point(args.x, args.y)

    if args.rect is not None:
        return get_absolute_position(point, args.rect, args.offset, args.check_bounds)

    if args.bounds is not None:
        return get_element_abs_pos(point, args.bounds)

    device_type = DeviceType(args.device_type or config.display.device_type)
    device_id = args.device_id or config.display.device_id
    options = {}
    if device_type == DeviceType.ADB:
        options = {
            "adb_path": config.display.adb_path,
            "timeout": config.display.query_timeout,
        }
    factory = set_device_type(device_type, device_id, **options)
    logger.info("Resolving against %s display", device_type.value)
    return factory.get_device_abs_pos(point)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = DriverConfig.from_mapping(load_config(args.config))
    except ValueError as e:
        print_with_color(f"Error: {e}", "red")
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        result = resolve(args, config)
    except InvalidCoordinatesError as e:
        print_with_color(f"Error: {e}", "red")
        return 1
    except DisplayQueryError as e:
        print_with_color(f"Error: Could not query display size: {e}", "red")
        return 1

    print_with_color(f"{result.x:g},{result.y:g}", "green")
    return 0


if __name__ == "__main__":
    sys.exit(main())
