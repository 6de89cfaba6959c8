"""
Exceptions raised by SecurePay Sentinel.
"""


class SentinelError(Exception):
    """Base exception for Sentinel errors."""

    pass


class InvalidInputError(SentinelError):
    """Transaction data is malformed and cannot be scored."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"Invalid {field}: {message}")


class RandomnessSourceError(SentinelError):
    """The velocity rule's random source returned a sample outside [0, 1)."""

    def __init__(self, sample: float):
        self.sample = sample
        super().__init__(f"Randomness sample {sample!r} outside [0, 1)")


class NotAuthenticatedError(SentinelError):
    """Operation requires an authenticated user."""

    pass


class TransactionNotFoundError(SentinelError):
    """No transaction with the given ID is visible to the caller."""

    def __init__(self, transaction_id):
        self.transaction_id = transaction_id
        super().__init__(f"Transaction {transaction_id} not found")


class ExplanationUnavailableError(SentinelError):
    """Only high-risk transactions carry a fraud explanation."""

    pass
