"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that concrete adapters implement.
- The core depends on these abstractions, never on the terminal itself.
"""
