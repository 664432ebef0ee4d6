def currency(amount: float) -> str:
    """-1234.5 -> "-$1,234.50" """
    amount = round(amount, 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def percent(value: float) -> str:
    return f"{value:.1f}%"


def whole_percent(fraction: float) -> str:
    return f"{fraction * 100:.0f}%"
