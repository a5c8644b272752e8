"""Bundled data files for treewipe."""
