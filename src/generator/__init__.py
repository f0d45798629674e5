"""Prank generator facade.

Example:
    >>> from src.generator import PrankGenerator
    >>> PrankGenerator().generate_prank("Alice", Role.EMPLOYEE)
    'Congratulations Alice! You have been promoted to Chief Joke Officer!'
"""

from src.generator.generator import PrankGenerator

__all__ = [
    "PrankGenerator",
]
