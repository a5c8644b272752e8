"""Core infrastructure for treewipe.

Paths, configuration, history state, theming and logging setup.
"""
