"""Shared type definitions for sweep."""

from collections.abc import Hashable
from typing import Literal, TypeAlias

# Identifier handed to a VersionStore to look up a content object
ObjectKey: TypeAlias = Hashable

# Outcome of classifying a change set
Classification: TypeAlias = Literal["full", "scoped"]

# Named content lifecycle moments
LifecycleEvent: TypeAlias = Literal["pre-publish", "post-write", "post-delete"]
