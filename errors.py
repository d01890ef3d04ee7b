class SecretSharingError(Exception):
    prefix = "Secret sharing failed."

    def __init__(self, message):
        self.message = f"{self.prefix} {message}"
        super().__init__(self.message)


class ConfigurationError(SecretSharingError, ValueError):
    prefix = "Invalid configuration."


class ThresholdExceedsShareCount(ConfigurationError):
    def __init__(self, threshold, num_shares):
        self.threshold = threshold
        self.num_shares = num_shares
        super().__init__(
            f"Threshold {threshold} exceeds the number of shares {num_shares}."
        )


class InvalidAbscissaError(ConfigurationError):
    prefix = "Invalid share x-coordinate."


class RandomSourceFailure(SecretSharingError):
    prefix = "Random source failure."


class ZeroDenominatorError(SecretSharingError, ZeroDivisionError):
    """Raised when a value with no inverse mod p has to be inverted."""

    prefix = "Zero denominator."


class InsufficientSharesError(SecretSharingError):
    prefix = "Not enough shares."

    def __init__(self, received, threshold):
        self.received = received
        self.threshold = threshold
        super().__init__(f"Need {threshold}, got {received}.")
