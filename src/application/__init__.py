"""Application layer - Use cases and orchestration.

This layer contains the use cases following the CQRS pattern:
- Commands: Register an appointment, apply a processor confirmation,
  store a message in a country processor
- Queries: Find the appointments of an insured person

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)

The application layer orchestrates domain logic but contains no business rules.
"""
