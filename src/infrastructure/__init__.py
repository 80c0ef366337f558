"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Appointment table (DynamoDB) and processor database (SQLAlchemy)
- Topic, event bus and queue adapters
- Secrets Manager, date validation, structured logging

Structure:
- persistence/: DynamoDB and relational repositories
- messaging/: SNS notifier, EventBridge publisher, SQS record mapper
- secrets/: AWS Secrets Manager adapter
- validation/: ISO-8601 date validator
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
