"""
Application Layer
Use case orchestration
"""
from nexus_kernel.application.use_case import EventCollector, TransactionalUseCase

__all__ = ["EventCollector", "TransactionalUseCase"]
