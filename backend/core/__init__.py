"""
Core package.

Geodesy, wind decomposition and the shot model. Everything here is pure and
synchronous.
"""
