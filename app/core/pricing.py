"""Free-text pricing parsing.

``extract_min_price`` turns whatever the admin typed into the pricing field
into a comparable number. Reference table:

    "$1.5k"                -> 1500.0
    "₹2,000"               -> 2000.0
    "From $100"            -> 100.0
    "$100–$500"            -> 100.0
    "2k-5k per reel"       -> 2000.0
    "Contact for pricing"  -> NO_PRICE
    None / ""              -> NO_PRICE
"""
import re
from typing import Optional

# "No price asserted". Passes every price filter, sorts as 0.
NO_PRICE = None

_AMOUNT_RE = re.compile(r"[$₹]?(\d+(?:,\d+)*(?:\.\d+)?)")
_THOUSANDS_SHORTHAND_LIMIT = 100


def extract_min_price(pricing_text: Optional[str]) -> Optional[float]:
    if not pricing_text or not isinstance(pricing_text, str):
        return NO_PRICE

    amounts = []
    for match in _AMOUNT_RE.finditer(pricing_text):
        try:
            amounts.append(float(match.group(1).replace(",", "")))
        except ValueError:
            continue

    if not amounts:
        return NO_PRICE

    # The "k" shorthand applies to the whole string, not to individual tokens.
    if "k" in pricing_text.lower():
        amounts = [
            amount * 1000 if amount < _THOUSANDS_SHORTHAND_LIMIT else amount
            for amount in amounts
        ]

    return min(amounts)


def price_sort_value(pricing_text: Optional[str]) -> float:
    """Ordering value: the extracted price, or 0 when no price is asserted."""
    price = extract_min_price(pricing_text)
    return 0.0 if price is NO_PRICE else price


def price_in_range(price: Optional[float], low: float, high: float) -> bool:
    if price is NO_PRICE:
        return True
    return low <= price <= high


def format_price(price: float) -> str:
    """Slider label, e.g. 500 -> "₹500", 2500 -> "₹2K"."""
    if price >= 1000:
        return f"₹{price / 1000:.0f}K"
    return f"₹{price:.0f}"
