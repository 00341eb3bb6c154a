"""Explainable CV-job matching and interview evaluation engine."""

__version__ = "0.1.0"
