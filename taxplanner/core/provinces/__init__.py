from taxplanner.core.provinces._progressive import (
    Bracket,
    BracketTable,
    apply_credits,
    bracket_table,
    calculate_progressive_tax,
    non_refundable_credit,
)

PROVINCE_CODE = "BC"
PROVINCE_NAME = "British Columbia"

__all__ = [
    "Bracket",
    "BracketTable",
    "PROVINCE_CODE",
    "PROVINCE_NAME",
    "apply_credits",
    "bracket_table",
    "calculate_progressive_tax",
    "non_refundable_credit",
]
