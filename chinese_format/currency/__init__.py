"""
Renminbi currency amounts.
"""

from chinese_format.currency.renminbi import (
    FINANCIAL_TERMINATOR,
    Cent,
    Dime,
    EverydayCent,
    EverydayDime,
    EverydayYuan,
    FinancialCent,
    FinancialDime,
    FinancialYuan,
    RenminbiCurrency,
    RenminbiCurrencyBuilder,
    Yuan,
)
from chinese_format.currency.style import CurrencyStyle

__all__ = [
    "FINANCIAL_TERMINATOR",
    "Cent",
    "CurrencyStyle",
    "Dime",
    "EverydayCent",
    "EverydayDime",
    "EverydayYuan",
    "FinancialCent",
    "FinancialDime",
    "FinancialYuan",
    "RenminbiCurrency",
    "RenminbiCurrencyBuilder",
    "Yuan",
]
