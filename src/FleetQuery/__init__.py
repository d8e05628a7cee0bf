"""FleetQuery: record-shaping and query engine for fleet dashboard tables."""

__version__ = "0.1.0"
