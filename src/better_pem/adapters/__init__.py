"""Adapters — concrete implementations of the domain ports."""
