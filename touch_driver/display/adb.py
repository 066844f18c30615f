"""Display size of an Android device queried through `adb shell wm size`."""

import logging
import re
import subprocess

from touch_driver.display.base import DisplayInfo
from touch_driver.exceptions import DisplayQueryError
from touch_driver.model import Rect

logger = logging.getLogger(__name__)

_SIZE_RE = re.compile(r"(Physical|Override) size:\s*(\d+)x(\d+)")


def parse_wm_size(output: str) -> tuple[int, int]:
    """
    Parse the output of `wm size`.

    Args:
        output: Command output, e.g. "Physical size: 1080x2400".

    Returns:
        (width, height); an override size wins over the physical size.

    Raises:
        DisplayQueryError: If no size line is found.
    """
    sizes = {}
    for kind, width, height in _SIZE_RE.findall(output):
        sizes[kind] = (int(width), int(height))

    if "Override" in sizes:
        return sizes["Override"]
    if "Physical" in sizes:
        return sizes["Physical"]
    raise DisplayQueryError(f"Could not parse display size from: {output.strip()!r}")


class ADBDisplay(DisplayInfo):
    """
    Queries the display size of an ADB device on every call.

    Args:
        device_id: Optional ADB device ID for multi-device setups.
        adb_path: Path to ADB executable.
        timeout: Timeout in seconds for the query.
    """

    def __init__(
        self, device_id: str | None = None, adb_path: str = "adb", timeout: float = 5
    ):
        self.device_id = device_id
        self.adb_path = adb_path
        self.timeout = timeout

    def display_width(self) -> int:
        return self.display_size()[0]

    def display_height(self) -> int:
        return self.display_size()[1]

    def display_rect(self) -> Rect:
        # Single query so width and height come from the same orientation.
        width, height = self.display_size()
        return Rect.from_size(width, height)

    def display_size(self) -> tuple[int, int]:
        """Run `wm size` on the device and return (width, height)."""
        cmd = self._get_adb_prefix() + ["shell", "wm", "size"]
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise DisplayQueryError(
                f"Display size query timed out after {self.timeout}s"
            ) from None
        except OSError as e:
            raise DisplayQueryError(f"Could not run {self.adb_path}: {e}") from e

        if result.returncode != 0:
            output = (result.stdout + result.stderr).strip()
            raise DisplayQueryError(f"adb wm size failed: {output}")

        width, height = parse_wm_size(result.stdout)
        logger.debug("adb reported display size %dx%d", width, height)
        return width, height

    def get_name(self) -> str:
        return "adb"

    def _get_adb_prefix(self) -> list:
        """Get ADB command prefix with optional device specifier."""
        if self.device_id:
            return [self.adb_path, "-s", self.device_id]
        return [self.adb_path]
