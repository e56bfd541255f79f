"""
Core geometry primitives and invariants.

This module contains the foundational building blocks for planar geometry:
the immutable Point2D value type, orientation predicates and point orderings.
"""
