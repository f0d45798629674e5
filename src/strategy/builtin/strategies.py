"""Built-in prank strategies (one per Role)."""

from src.models.types import Role
from src.strategy.base import TemplatePrankStrategy


class EmployeePrankStrategy(TemplatePrankStrategy):
    role = Role.EMPLOYEE
    template = "Congratulations {name}! You have been promoted to Chief Joke Officer!"


class ManagerPrankStrategy(TemplatePrankStrategy):
    role = Role.MANAGER
    template = "URGENT: Surprise meeting with the CEO in 5 minutes. Prepare a presentation!"


class DeveloperPrankStrategy(TemplatePrankStrategy):
    role = Role.DEVELOPER
    template = "[CRITICAL ALERT] A fatal error has been detected in your IDE! Error code: APR-001."


class CorporatePlayerPrankStrategy(TemplatePrankStrategy):
    role = Role.CORPORATE_PLAYER
    template = "URGENT Circle meeting about objectives in 3 min"


class HRPrankStrategy(TemplatePrankStrategy):
    role = Role.HR
    template = "You're demoted to Standardist!"


class UXUIPrankStrategy(TemplatePrankStrategy):
    role = Role.UXUI
    template = "The figma files disappeared and we have a meeting in 5 min."
