"""Domain layer - Pure business logic.

Entities, value objects, protocols (ports) and domain errors. No framework
or infrastructure imports.

Structure:
- entities/: Domain entities (frozen dataclasses composing AuditFields)
- value_objects/: Token and propagation values
- protocols/: Capability interfaces implemented by infrastructure
- errors/: Authentication error variants
"""
