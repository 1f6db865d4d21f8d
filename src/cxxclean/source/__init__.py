"""Source partitioning: regions, extraction and the scan entry points."""

from cxxclean.source.models import Partition, RegionKind, SourceItem, SourcePiece
from cxxclean.source.partition import partition, scan_file, scan_regions

__all__ = [
    "Partition",
    "RegionKind",
    "SourceItem",
    "SourcePiece",
    "partition",
    "scan_file",
    "scan_regions",
]
