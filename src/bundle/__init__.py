"""Extension bundling.

This package drives esbuild to produce the distributable
browser bundle from the workspace entry point.
"""
