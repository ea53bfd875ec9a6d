"""HTTP request/response schemas (pydantic).

Kept separate from domain entities; these are presentation-layer concerns.
"""
