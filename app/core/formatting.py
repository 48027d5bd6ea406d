"""Display helpers shared by the directory, hiring and profile endpoints."""

from datetime import date, datetime
from typing import Optional, Union


def format_currency(amount: Optional[float]) -> str:
    """Naira amount with thousands separators and no fraction digits, e.g. ₦150,000"""
    if amount is None:
        return ""
    return f"₦{amount:,.0f}"


def truncate_text(text: Optional[str], max_length: int) -> str:
    if not text:
        return ""
    return f"{text[:max_length]}..." if len(text) > max_length else text


def get_initials(name: Optional[str], fallback: str = "?") -> str:
    if not name or not name.strip():
        return fallback
    return "".join(part[0] for part in name.split()).upper()[:2]


def format_date(value: Union[str, date, datetime, None]) -> str:
    """Short readable date, e.g. Oct 17, 2026"""
    if not value:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    return f"{value:%b} {value.day}, {value.year}"
