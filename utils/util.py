from colorama import Fore, Style

_COLORS = {
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
    "black": Fore.BLACK,
}


def print_with_color(text: str, color: str = "") -> None:
    """Print text in the given colour name; unknown names print plain text."""
    prefix = _COLORS.get(color, "")
    print(prefix + text + Style.RESET_ALL)
