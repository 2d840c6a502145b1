"""Application layer - Use cases and orchestration.

Structure:
- commands/: Profile command dataclasses and handlers (write operations)
- queries/: PaginateCollection and its handler (read operations)
- services/: Access guard, navigation, notification fan-out, page loader
- errors/: ApplicationError wrapping domain errors for the presentation layer

The application layer orchestrates domain logic but contains no business rules.
"""
