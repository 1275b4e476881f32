"""Catalog bounded context: runner adapters that list and execute tests."""
