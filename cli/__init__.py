"""Command line interface for axesyx."""
