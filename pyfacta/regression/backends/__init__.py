"""
Regression backends.

Available backends:
    CPUSumsBackend: closed-form line fit from single-pass sums
"""

from pyfacta.regression.backends.cpu import CPUSumsBackend

__all__ = [
    "CPUSumsBackend",
]
