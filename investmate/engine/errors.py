"""
Typed calculation errors.

Every failure is local to one calculation. Tools catch InvestMateError and
report it as {"error": ..., "error_type": code}; nothing here is retryable.
"""


class InvestMateError(ValueError):
    code = "invalid_input"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    def as_payload(self) -> dict[str, str]:
        payload = {"error": str(self), "error_type": self.code}
        if self.field:
            payload["field"] = self.field
        return payload


class InvalidNumericInput(InvestMateError):
    code = "invalid_numeric_input"


class OutOfRangeInput(InvestMateError):
    code = "out_of_range"


class InvalidChoice(InvestMateError):
    code = "invalid_choice"


class MissingTierGuidance(InvestMateError):
    code = "missing_tier_guidance"


class ProfileNotFound(InvestMateError):
    code = "not_found"
