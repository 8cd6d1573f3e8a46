"""Classic algorithm and data-structure solutions as plain functions and small classes."""

__version__ = "0.1.0"