"""
itsyhome bridge: addresses home accessories, scenes and groups by free-form text.
"""
from .models import Group, Room, Scene, Service, ServiceType, Snapshot
from .resolution import ResolveKind, ResolveResult, resolve

__all__ = [
    "Group",
    "Room",
    "Scene",
    "Service",
    "ServiceType",
    "Snapshot",
    "ResolveKind",
    "ResolveResult",
    "resolve",
]
