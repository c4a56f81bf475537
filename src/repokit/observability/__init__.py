"""
repokit.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Context propagation for consistent log enrichment.
"""

# Package marker.
