"""
Core domain models, clock, and contracts.

This module contains the foundational building blocks that are independent
of external systems (storage, transport, etc.).
"""
