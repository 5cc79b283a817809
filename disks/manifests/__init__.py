"""Run manifests."""

from .manifest import Manifest
from .serializers import dump_manifest, load_manifest

__all__ = ["Manifest", "dump_manifest", "load_manifest"]
