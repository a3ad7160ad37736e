"""
Core domain models, arithmetic primitives, and invariants.

This module contains the arbitrary-precision integer type and the
algorithms operating directly on its digit representation. It performs
no I/O besides the explicit stream helpers and never logs.
"""
