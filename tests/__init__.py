"""
Test suite for bigint-core

Contains:
- tests/unit/          : Unit tests for digits, arithmetic, number theory, contracts and the demo runner
"""
