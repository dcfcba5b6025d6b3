"""Lifecycle layer: content events to purge submissions.

Connects the host's content lifecycle (publish, save, delete) to the rule
layer, through collaborator protocols the host implements.
"""

from sweep.lifecycle.collaborators import (
    ContentRef,
    DirtyFieldTracker,
    Notifier,
    PurgeTransport,
    VersionStore,
)
from sweep.lifecycle.decision import LifecycleDecision, decide
from sweep.lifecycle.links import LinkProvider
from sweep.lifecycle.purger import ContentPurger, PurgeOutcome

__all__ = [
    "ContentPurger",
    "ContentRef",
    "DirtyFieldTracker",
    "LifecycleDecision",
    "LinkProvider",
    "Notifier",
    "PurgeOutcome",
    "PurgeTransport",
    "VersionStore",
    "decide",
]
