"""Contracts (protocols) implemented by adapters."""
