"""
Our data: base hue -> (gradient start, gradient stop). Used when render_all gets no styling.
Each hue pairs with its neighbour on the color wheel.
"""
COLOR_PAIRINGS: dict[str, tuple[str, str]] = {
    "red": ("red", "pink"),
    "pink": ("pink", "purple"),
    "purple": ("purple", "blue"),
    "blue": ("blue", "cyan"),
    "cyan": ("cyan", "green"),
    "green": ("green", "yellow"),
    "yellow": ("yellow", "orange"),
    "orange": ("orange", "red"),
}

PAIRING_HUES: tuple[str, ...] = tuple(COLOR_PAIRINGS)
