"""
Core domain models, exact-number primitives, and the type catalog.

This module contains the foundational building blocks of the type-constraint
engine: descriptors, bounds derivation, and accuracy rules. It has no
knowledge of how types are attached to object attributes.
"""
