"""
File storage infrastructure.

Exports:
    - RecommendationExcelWriter: CalculationResult -> .xlsx (openpyxl)
"""

from .excel_writer import RecommendationExcelWriter

__all__ = [
    "RecommendationExcelWriter",
]
