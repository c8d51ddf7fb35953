"""Static reference data consumed as read-only lookup tables."""
