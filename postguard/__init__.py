"""postguard — rule-based compliance checking for social and marketing copy."""

__version__ = "0.1.0"
