"""
GraphQL API Package
===================
Strawberry GraphQL implementation of the book catalog.
"""

from .schema import schema

__all__ = ["schema"]
