"""Application layer - detection use cases."""
