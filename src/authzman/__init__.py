"""Authorization configuration manager for role-based access control."""

__version__ = "0.1.0"
