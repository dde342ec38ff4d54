"""
Core term model, numeric primitives, and wire contracts.

This package is independent of the host interpreter: it knows nothing about
execution contexts, plans, or fuzzy values.
"""
