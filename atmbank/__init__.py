"""Console ATM simulator with admin and customer accounts stored in text files."""

__version__ = "0.1.0"

__all__ = ["__version__"]