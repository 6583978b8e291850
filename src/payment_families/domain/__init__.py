"""Domain layer - Value objects, outcomes and rules.

This layer contains:
- Value Objects: Immutable objects defined by their attributes (e.g., Amount, CardNumber)
- Entities: Outcomes produced by the application layer (e.g., PaymentResult)
- Domain Exceptions: Malformed input and unknown families

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
