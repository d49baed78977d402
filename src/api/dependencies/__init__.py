"""API dependency providers."""
