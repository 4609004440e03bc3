"""Domain types for the guessing game.

Pure data structures and the error taxonomy. Nothing here knows about the
terminal, Typer or Rich.
"""
