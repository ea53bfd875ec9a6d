"""Stockroom inventory service.

Layered REST backend: token-based authentication backed by an expiring
key-value store, and inventory propagation across a space hierarchy.
"""

__version__ = "0.1.0"
