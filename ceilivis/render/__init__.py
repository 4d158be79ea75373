"""Renderers for recorded runs."""
