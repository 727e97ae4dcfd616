"""Core library: layers, catalog, language resolution and editor adapters."""
