"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces, connecting
the query service to the text network format, the Dijkstra search and
the connectivity analysis.
"""
