import pytest

from touch_driver.display import DisplayInfo
from touch_driver.config import reset_driver_config
from touch_driver.display_factory import reset_display_factory
from touch_driver.model import Rect


class CountingDisplay(DisplayInfo):
    """Display stub that records how often it was queried."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.queries = 0

    def display_width(self) -> int:
        self.queries += 1
        return self.width

    def display_height(self) -> int:
        self.queries += 1
        return self.height

    def get_name(self) -> str:
        return "counting"


@pytest.fixture(autouse=True)
def _reset_globals():
    reset_display_factory()
    reset_driver_config()
    yield
    reset_display_factory()
    reset_driver_config()


@pytest.fixture
def rect():
    return Rect(0, 0, 100, 200)


@pytest.fixture
def counting_display():
    return CountingDisplay(1080, 2400)
