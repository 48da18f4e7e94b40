"""Interface protocols for Arr Repair."""

from .api_client import ArrApiProtocol
from .presenter import PresenterProtocol

__all__ = ["ArrApiProtocol", "PresenterProtocol"]
