"""Application layer: ports consumed by the presentation layer."""
