"""
Test suite for planar Point2D geometry

Contains:
- tests/unit/          : Unit tests for individual modules
"""
