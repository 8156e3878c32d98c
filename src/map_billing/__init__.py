"""Naver Maps API billing estimator."""

__version__ = "1.0.0"
