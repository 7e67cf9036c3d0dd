def format_money(amount: float) -> str:
    """Compact dollar string: ``$12.34``, ``$1.2k`` or ``$12k``."""
    if amount >= 10000:
        return f"${amount / 1000:.0f}k"
    if amount >= 1000:
        return f"${amount / 1000:.1f}k"
    return f"${amount:.2f}"


def format_hours(hours: float) -> str:
    return f"{hours:.1f}h"


def format_percent(percent: float) -> str:
    return f"{percent:.1f}%"


def format_price(price: float) -> str:
    """Plain price with trailing zeros dropped: ``17.99``, ``20``, ``1234567``."""
    text = f"{price:.2f}".rstrip("0").rstrip(".")
    return text or "0"
