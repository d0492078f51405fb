"""fskit - filesystem utility layer.

Recursive directory scanning into an in-memory tree, failure-aware
recursive removal, and I/O primitives that report OS failures as
structured errors.
"""

__version__ = "0.1.0"
