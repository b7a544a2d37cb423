"""acctctl — username normalization and password strength checks."""

__version__ = "0.1.0"
