"""
Operations plugin package.

Each operation is implemented as a separate module in this directory.
"""
