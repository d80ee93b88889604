"""Form exceptions."""


class FormContractError(ValueError):
    """Raised when a form field is constructed in a way that violates its contract."""
