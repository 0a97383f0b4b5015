"""Adapters to the other platform services."""
