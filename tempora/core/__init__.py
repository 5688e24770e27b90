"""
Core domain models, exact arithmetic primitives, and invariants.

This module contains the building blocks that are independent of any data
source (leap-second bulletins, timezone databases, etc.).
"""
