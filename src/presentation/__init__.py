"""Presentation layer - Lambda entry points and transport concerns.

This layer contains the controllers bound to each Lambda trigger. The
presentation layer is thin - it validates the raw event, dispatches
commands/queries to the application layer and translates results to the
transport's response (or re-raises so the queue redelivers).

Structure:
- lambdas/: Controllers and entry points for both functions

The presentation layer depends on the application layer (dispatches
commands/queries) but contains NO business logic.
"""
