"""Infrastructure — logging, storage backends and database plumbing.

Invariants:
    - Every backend satisfies core/repository_protocols.EntityRepository
    - Nothing here is imported by core/
"""
