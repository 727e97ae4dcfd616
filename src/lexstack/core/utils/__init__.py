"""Shared utilities for lexstack core modules."""
