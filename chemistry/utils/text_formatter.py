# chemistry/utils/text_formatter.py
import re

from chemistry.config import TRANSFER_AMOUNT_DECIMALS

TAG_PATTERN = re.compile(r'(\[\[.*?\]\])')

def strip_formatting(text: str) -> str:
    """Remove [[TAG]] formatting codes, leaving the plain message."""
    return TAG_PATTERN.sub("", text)

def format_amount(amount: float) -> str:
    """Render a reagent volume for the player: 20.0 -> '20', 12.3456 -> '12.35'."""
    rounded = round(amount, TRANSFER_AMOUNT_DECIMALS)
    if rounded == 0:
        rounded = 0.0 # Avoid printing "-0"
    return f"{rounded:.{TRANSFER_AMOUNT_DECIMALS}f}".rstrip("0").rstrip(".")
