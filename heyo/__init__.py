"""
Heyo Notes.

- backend/: REST API, database, configuration
- client/: HTTP client, response cache, filtering and export
- cli/: Terminal client (Typer + Rich)
"""
