"""
Terminal Client.

Typer command groups for the notes screens, the API server and
database migrations. The CLI is a thin presentation layer: every
note operation goes through heyo.client over HTTP.
"""
