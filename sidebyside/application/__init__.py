"""Application layer: comparison and fingerprint services."""
