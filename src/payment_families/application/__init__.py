"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: PaymentService, the client that orchestrates a family
- Ports: Abstract capabilities a family supplies (validator, processor,
  logger, factory) and the collaborators they are built with

The application layer depends only on the domain layer.
Concrete families are injected through a PaymentFactory.
"""
