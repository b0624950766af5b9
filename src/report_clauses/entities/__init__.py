"""
Entities package.

Each subdirectory represents one part of clause rendering:
- in_clause/: (NOT) IN clause builder, errors and clause registry
- shared/: protocols for the query context and an in-memory implementation
"""
