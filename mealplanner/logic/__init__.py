"""Core business logic layer.

Subpackages:
- shopping: aggregating selected meals into a shopping list
- extraction: turning recipe text into structured ingredients via a completion service
"""
__all__ = ["shopping", "extraction"]
