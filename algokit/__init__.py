"""Contest-style data structures and algorithms: range trees, ordered sets,
graphs, strings, number theory and random test-data generators."""

__version__ = "0.1.0"