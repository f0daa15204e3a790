"""ANSI terminal escape sequences for clearing and cursor placement."""

ESC = "\x1b"


def clear_screen() -> str:
    """Return the sequence that moves home and clears the screen."""
    return f"{ESC}[H{ESC}[2J"


def goto(row: int, col: int) -> str:
    """Return the sequence that moves the cursor to a zero-based row and column."""
    return f"{ESC}[{row + 1};{col + 1}H"