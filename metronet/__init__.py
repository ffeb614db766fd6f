"""Top-level package for the metronet project.

metronet models a metro network as a graph of stations connected by
labeled lines and answers route and line-outage queries on it.
"""

__version__ = "0.1.0"
