"""Orchestration processors for coordinating services."""

from .repair_processor import RepairProcessor

__all__ = ["RepairProcessor"]
