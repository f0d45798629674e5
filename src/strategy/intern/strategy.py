"""Intern prank strategy."""

from src.models.types import Role
from src.strategy.base import TemplatePrankStrategy


class InternPrankStrategy(TemplatePrankStrategy):
    """employee Role을 공유하지만 다른 문구를 생성하는 전략."""

    role = Role.EMPLOYEE
    template = "Hey {name}, the CEO wants you to get coffee for the entire department!"
