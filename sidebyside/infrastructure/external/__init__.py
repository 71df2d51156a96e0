"""External services (search backends)."""
