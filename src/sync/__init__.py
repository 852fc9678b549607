"""Workspace sync actions.

This package regenerates workspace files from upstream sources:
the patched global declaration file and the module import map.
"""
