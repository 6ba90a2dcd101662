# Host glue: a single document frame
from .frame import Frame, NavigationRequest

__all__ = ["Frame", "NavigationRequest"]
