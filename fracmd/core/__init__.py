"""Core numerical types and the escape-time iteration."""
