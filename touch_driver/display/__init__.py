"""Display-size provider exports."""

from .adb import ADBDisplay, parse_wm_size
from .base import DisplayInfo
from .static import StaticDisplay


def get_display(name: str, **kwargs) -> DisplayInfo:
    """Factory to get display provider by backend name."""
    name = name.lower()
    if name == "u2":
        # uiautomator2 is only imported when its backend is used.
        from .u2 import U2Display

        return U2Display(**kwargs)

    displays = {
        "adb": ADBDisplay,
        "static": StaticDisplay,
    }

    display_class = displays.get(name)
    if display_class is None:
        raise ValueError(
            f"Unknown display: {name}. Available: {list(displays.keys()) + ['u2']}"
        )

    return display_class(**kwargs)


__all__ = [
    "DisplayInfo",
    "ADBDisplay",
    "StaticDisplay",
    "get_display",
    "parse_wm_size",
]
