"""Presentation layer: login router, error values and HTTP adapter."""
