"""
Core primitives of the BigInt engine.

Limb-level algorithms (math/) and the value objects describing the
representation (domain/). Nothing here knows about signs except the
snapshot model.
"""
