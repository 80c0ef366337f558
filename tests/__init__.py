"""Test suite for the appointment scheduling functions.

Test structure:
- unit/: Unit tests - domain logic, handlers, adapters (moto, aiosqlite)
  and Lambda entry points, all without network access.
"""
