"""Fleet Console: dashboard metrics, inventory view and fleet utilities."""

__version__ = "0.1.0"
