"""
Infrastructure layer.

Concrete authentication providers and card stores: an HTTP backend reached
with httpx, and in-process implementations for local use and tests.
"""
