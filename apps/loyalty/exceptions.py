"""
Loyalty domain errors.
"""


class LoyaltyError(Exception):
    """Base class for loyalty engine errors"""


class InvalidInputError(LoyaltyError, ValueError):
    """Raised for negative XP, negative spend or non-numeric input"""


class InvalidConfigurationError(LoyaltyError, ValueError):
    """Raised when a loyalty configuration fails validation"""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__('; '.join(self.problems))
