"""Read-only statistics views.

This module exposes dataset and feature handles over one shared,
immutable index of a statistics snapshot.
"""
