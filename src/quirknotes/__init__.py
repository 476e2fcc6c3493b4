"""
QuirkNotes Backend - personal note-taking API

Users register, log in with a short-lived JWT and manage notes that only
they can see.
"""

__version__ = "1.0.0"
