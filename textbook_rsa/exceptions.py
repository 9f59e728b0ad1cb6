"""Errors raised by key generation and encryption."""


class RetryBudgetExceededError(RuntimeError):
    """A bounded retry loop ran out of attempts before finding a valid result."""

    def __init__(self, operation: str, max_attempts: int) -> None:
        super().__init__(
            f"{operation} exceeded retry budget of {max_attempts} attempts."
        )
        self.operation = operation
        self.max_attempts = max_attempts


class MessageRangeError(ValueError):
    """A message value is not below the modulus and cannot round-trip."""

    def __init__(self, value: int, modulus: int) -> None:
        super().__init__(
            f"Message value {value} is not below the modulus N={modulus}. "
            "Use a longer key."
        )
        self.value = value
        self.modulus = modulus
