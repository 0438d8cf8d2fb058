"""Rendering primitives: node tree, overlay host, dialogs and paginator."""
