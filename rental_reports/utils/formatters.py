"""
Text formatting helpers for console reports
"""
from typing import Iterable
from datetime import datetime, date

BOX_WIDTH = 66


def format_price(amount: float, currency: str = "RM") -> str:
    """Formats a money amount, e.g. RM125.50"""
    return f"{currency}{amount:.2f}"


def format_date(date_obj, format_str: str = "%Y-%m-%d") -> str:
    """Formats a date, datetime or ISO string"""
    if isinstance(date_obj, str):
        try:
            date_obj = datetime.fromisoformat(date_obj.replace('Z', '+00:00'))
        except ValueError:
            return date_obj
    if isinstance(date_obj, (datetime, date)):
        return date_obj.strftime(format_str)
    return str(date_obj)


def format_percentage(part: float, total: float) -> str:
    """Share of part in total with one decimal, 0.0% when total is zero"""
    if not total:
        return "0.0%"
    return f"{part / total * 100:.1f}%"


def format_divider(style: str = "thin", width: int = BOX_WIDTH) -> str:
    """Creates a divider line"""
    if style == "thick":
        return "═" * width
    elif style == "dotted":
        return "┄" * width
    else:
        return "━" * width


def _clip(text: str, width: int) -> str:
    """Cuts text to width, marking the cut with an ellipsis"""
    if len(text) <= width:
        return text
    return text[:width - 1] + "…"


def format_box(title: str, lines: Iterable[str] = (), width: int = BOX_WIDTH) -> str:
    """
    Draws a boxed block with a centered title, used for CLI menus

    Lines longer than the box are clipped so the right border stays aligned.
    """
    inner = width - 2
    rows = [
        "╔" + "═" * width + "╗",
        "║" + _clip(title, width).center(width) + "║",
    ]
    body = list(lines)
    if body:
        rows.append("╠" + "═" * width + "╣")
        for line in body:
            rows.append(f"║ {_clip(line, inner):<{inner}} ║")
    rows.append("╚" + "═" * width + "╝")
    return "\n".join(rows)
