"""
handlers/ - Presentation Layer
===============================
Console command parsing and handlers for the wise saying app.
Handlers only talk to services, never to repositories or the database directly.
"""
