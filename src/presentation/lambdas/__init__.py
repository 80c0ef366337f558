"""Lambda transport bindings.

- ActionController: request/response envelope ({"action", "data"})
- NotificationQueueController: processor confirmations from SQS
- appointment_handler.handler: appointment function entry point
- processor_handler.handler: country processor entry point
"""
