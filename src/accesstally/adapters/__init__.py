"""Adapters connecting the analyzer to concrete entry sources."""
