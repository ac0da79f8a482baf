class PromptFitError(Exception):
    """Base exception for prompt building errors."""

    pass


class InvalidArgumentError(PromptFitError, ValueError):
    """Raised when a caller passes a missing or out-of-range argument.

    These are call-site bugs. Running out of budget is not one of them:
    PromptBuilder.add reports that by returning False.
    """

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")
