"""
nexus_kernel
Domain-modeling kernel: value objects, aggregates with domain events, and
transactional boundaries over async SQLAlchemy
"""

__version__ = "0.1.0"
