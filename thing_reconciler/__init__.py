"""
Thing Reconciler Root Module

Reconciles managed device descriptors ("Things") with partial updates.

Layer Structure:
- Domain: Things, channels, UIDs, builders and the equality rules
- Application: Update DTOs, mappers and the merge use cases
- Shared: Cross-cutting concerns such as logging and enums
- Main: Composition root and configuration
"""
