def fmt_money(value, currency: str = "$") -> str:
    try:
        formatted = f"{abs(value):,.2f}".replace(",", " ")
        sign = "" if value >= 0 else "-"
        return f"{sign}{formatted} {currency}"
    except Exception as _exc:
        return f"{value} {currency}"


def fmt_count(n: int) -> str:
    return f"{n} employee" if n == 1 else f"{n} employees"
