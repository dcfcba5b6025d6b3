"""Sweep: CDN purge rules for content lifecycle events.

Decides, for each content publish, save, or delete, whether the whole site
cache must be purged or only the object's own URLs (live, draft, or both),
and hands the result to a purge transport.

Quick start::

    from sweep import ContentPurger, ContentRef, LinkProvider
    from sweep.transport import RecordingTransport

    purger = ContentPurger(RecordingTransport(), links=LinkProvider(link=lambda page: page.url))
    purger.after_delete(ContentRef(key=7, instance=page, versioned=True))

Layers::

    sweep.rules          Pure decision logic (classify, stage URLs, purge sets)
    sweep.lifecycle      Lifecycle hooks over host collaborators
    sweep.transport      CDN transports (Cloudflare, in-memory)
    sweep.observability  Decision and purge event log

"""

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ChangeSet",
    "ContentPurger",
    "ContentRef",
    "LinkProvider",
    "PurgeDecision",
    "PurgeScope",
    "SweepConfig",
    "__version__",
    "classify",
    "compute",
    "to_stage_variant",
]

_LAZY_IMPORTS: dict[str, str] = {
    "ChangeSet": "sweep.rules.classifier",
    "classify": "sweep.rules.classifier",
    "PurgeDecision": "sweep.rules.purge_set",
    "PurgeScope": "sweep.rules.purge_set",
    "compute": "sweep.rules.purge_set",
    "to_stage_variant": "sweep.rules.variants",
    "ContentPurger": "sweep.lifecycle.purger",
    "ContentRef": "sweep.lifecycle.collaborators",
    "LinkProvider": "sweep.lifecycle.links",
    "SweepConfig": "sweep.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import sweep`` fast for hosts that only register hooks.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is not None:
        import importlib

        return getattr(importlib.import_module(module_name), name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
