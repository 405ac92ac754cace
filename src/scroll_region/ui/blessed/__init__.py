"""Blessed terminal integration."""
