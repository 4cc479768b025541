"""Number formatting utilities for prompt text"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[Decimal, int, float]


def format_number_id(value: Number) -> str:
    """Format a number the id-ID way: "." groups thousands, "," separates up to 3 decimals"""
    quantized = Decimal(str(value)).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    sign = "-" if quantized < 0 else ""
    integer_part, _, fraction = f"{abs(quantized):f}".partition(".")
    grouped = f"{int(integer_part):,}".replace(",", ".")
    fraction = fraction.rstrip("0")
    return f"{sign}{grouped},{fraction}" if fraction else f"{sign}{grouped}"


def format_rupiah(value: Number) -> str:
    """Rupiah amount as shown to users, e.g. ``Rp 2.500.000``"""
    return f"Rp {format_number_id(value)}"
