"""Example scripts for pairmath.

This package demonstrates library usage but is not part of the core API.
"""
