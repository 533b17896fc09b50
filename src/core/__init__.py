"""
Core arithmetic primitives, domain models, and contracts.

This module contains the foundational building blocks that are independent
of the engine and the access gateway.
"""
