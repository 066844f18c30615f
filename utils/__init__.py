from utils.config import load_config
from utils.util import print_with_color

__all__ = [
    "load_config",
    "print_with_color",
]
