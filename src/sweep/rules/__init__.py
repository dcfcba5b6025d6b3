"""Rule layer: pure purge decision logic.

Classifies content changes, derives stage URL variants, and computes the
set of URLs (or the site-wide signal) to hand to a purge transport.
"""

from sweep.rules.classifier import ChangeSet, classify
from sweep.rules.differ import diff_fields
from sweep.rules.purge_set import (
    PurgeDecision,
    PurgeEverything,
    PurgeRequest,
    PurgeScope,
    compute,
)
from sweep.rules.variants import to_stage_variant

__all__ = [
    "ChangeSet",
    "PurgeDecision",
    "PurgeEverything",
    "PurgeRequest",
    "PurgeScope",
    "classify",
    "compute",
    "diff_fields",
    "to_stage_variant",
]
