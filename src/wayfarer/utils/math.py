# Unsigned 16-bit ceiling; health and experience never exceed it.
STAT_MAX = 65535


def clamp(value: int, min_value: int, max_value: int) -> int:
    """Clamp an integer between min_value and max_value inclusive."""
    return max(min_value, min(value, max_value))


def saturating_sub(value: int, amount: int, floor: int = 0) -> int:
    """Subtract amount from value, stopping at floor instead of going below it."""
    return max(floor, value - amount)


def saturating_add(value: int, amount: int, ceiling: int = STAT_MAX) -> int:
    """Add amount to value, stopping at ceiling instead of wrapping past it."""
    return min(ceiling, value + amount)
