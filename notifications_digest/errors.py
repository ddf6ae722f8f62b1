"""Error types raised by the digest pipeline."""


class DigestError(Exception):
    """Base class for all pipeline failures."""


class ConfigurationError(DigestError):
    """Raised when run configuration is inconsistent."""


class RetrievalError(DigestError):
    """Raised when notifications cannot be fetched."""


class SummaryError(DigestError):
    """Raised when the summary cannot be generated."""


class DeliveryError(DigestError):
    """Raised when the summary cannot be delivered."""
