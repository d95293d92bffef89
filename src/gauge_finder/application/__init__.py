"""Application layer - search use cases over the domain."""
