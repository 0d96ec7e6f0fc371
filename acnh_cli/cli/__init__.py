"""
Command-line front end built with Typer and Rich.
"""
