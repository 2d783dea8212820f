"""Library Catalog - Utilities Package

Console rendering helpers for the CLI.
"""
