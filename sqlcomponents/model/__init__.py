"""Metadata models consumed by the code generator."""
