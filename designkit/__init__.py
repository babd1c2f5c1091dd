"""designkit: SOLID principles and creational patterns, before and after."""

__version__ = "0.1.0"
