"""
Application Services

Responsibility:
    Use cases that coordinate domain services with injected infrastructure.

Contains:
    - CalculateRecommendationsUseCase: Catalog + loads + preferences -> result
"""

from .calculate_recommendations_use_case import CalculateRecommendationsUseCase

__all__ = [
    "CalculateRecommendationsUseCase",
]
