"""Shared domain records, settings and configuration loading."""
