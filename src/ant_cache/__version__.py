"""Version information for ant-cache."""

__version__ = "1.0.0"
