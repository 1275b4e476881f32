"""Change- and suite-driven end-to-end test selection."""

__version__ = "0.1.0"
