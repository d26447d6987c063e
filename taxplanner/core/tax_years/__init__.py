TAX_YEAR = 2025

__all__ = ["TAX_YEAR"]
