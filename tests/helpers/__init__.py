"""Test helper modules for the lexstack test suite.

- editor: RecordingEditor, an EditorCommands double that records commands
- io_utils: YAML/text writers that create parent directories
- layers: four-layer stack builder and document writers
- cache_utils: cache reset utilities for test isolation
"""
