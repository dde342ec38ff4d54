"""
Test suite for agentmath

Contains:
- tests/unit/          : Unit tests for individual modules and actions
"""
