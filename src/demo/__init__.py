"""Demonstration program for the arbitrary-precision integer core."""
