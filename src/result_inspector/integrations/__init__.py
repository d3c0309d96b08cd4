"""Integrations subpackage for result-inspector.

Contains the pytest plugin, auto-discovered via the pytest11 entry point.
"""
