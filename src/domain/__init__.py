"""Domain layer - Pure business logic.

This layer contains the appointment entity, its value objects, the error
taxonomy and the protocols (ports) the use cases depend on. The domain
layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (mutable, have identity)
- value_objects/: Value objects (immutable, self-validating)
- enums/: Lifecycle states and supported countries
- errors/: Validation, not-found and infrastructure error kinds
- protocols/: Repository, notifier, publisher and service interfaces
"""
