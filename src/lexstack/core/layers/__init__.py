"""Layered data-directory resolution for lexstack.

Language definitions are read from several data-directory roots and merged
with later roots overriding earlier ones.

Default stack (low → high precedence):
  system → user → system-nonpackaged → user-nonpackaged
"""

from .stack import LayerSpec, LayerStack, resolve_layer_stack

__all__ = ["LayerSpec", "LayerStack", "resolve_layer_stack"]
