#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers for adf2md parsers and renderers."""
