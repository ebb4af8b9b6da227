"""Registry snapshot export to JSON and YAML."""
from __future__ import annotations

from tourreg.export.serializer import RegistrySerializer

__all__ = ["RegistrySerializer"]
