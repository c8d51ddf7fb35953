"""Booking and room inventory consistency core for a hotel front desk."""

__version__ = "1.0.0"
