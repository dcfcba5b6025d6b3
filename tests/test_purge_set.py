"""Tests for sweep.rules.purge_set: decisions to purge targets."""

from __future__ import annotations

import pytest

from sweep.rules.purge_set import (
    PurgeDecision,
    PurgeEverything,
    PurgeRequest,
    PurgeScope,
    compute,
)


class TestCompute:
    """compute(): full decisions signal everything, scoped ones list URLs."""

    def test_full_returns_everything_signal(self) -> None:
        result = compute(PurgeDecision.everything(), ["/a", "/b"])
        assert isinstance(result, PurgeEverything)
        assert not isinstance(result, PurgeRequest)

    def test_full_never_resolves_links(self) -> None:
        def links() -> list[str]:
            raise AssertionError("links resolved for a full purge")

        assert compute(PurgeDecision.everything(), links) == PurgeEverything()

    def test_full_ignores_scope(self) -> None:
        result = compute(PurgeDecision(full=True, scope=PurgeScope.DRAFT), ["/a"])
        assert isinstance(result, PurgeEverything)

    def test_live_scope_returns_links_verbatim(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.LIVE), ["/a", "/b?x=1"])
        assert result == PurgeRequest(urls=("/a", "/b?x=1"))

    def test_draft_scope_returns_stage_variants(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.DRAFT), ["/a", "/b?x=1"])
        assert result.urls == ("/a?stage=Stage", "/b?x=1&stage=Stage")

    def test_both_scope_lists_live_then_draft(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.BOTH), ["/a"])
        assert result.urls == ("/a", "/a?stage=Stage")

    def test_both_scope_multiple_links(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.BOTH), ["/a", "/b"])
        assert result.urls == ("/a", "/b", "/a?stage=Stage", "/b?stage=Stage")

    def test_duplicates_removed_first_seen_order(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.LIVE), ["/a", "/b", "/a"])
        assert result.urls == ("/a", "/b")

    def test_link_already_staged_is_deduplicated(self) -> None:
        result = compute(
            PurgeDecision.scoped(PurgeScope.BOTH), ["/a?stage=Stage", "/a"]
        )
        assert result.urls == ("/a?stage=Stage", "/a")

    def test_empty_links_give_empty_request(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.BOTH), [])
        assert result == PurgeRequest()
        assert not result

    def test_callable_links_resolved_for_scoped(self) -> None:
        result = compute(PurgeDecision.scoped(PurgeScope.LIVE), lambda: ("/x",))
        assert result.urls == ("/x",)

    def test_custom_stage_parameter(self) -> None:
        result = compute(
            PurgeDecision.scoped(PurgeScope.DRAFT),
            ["/a"],
            stage_param="preview",
            stage_value="1",
        )
        assert result.urls == ("/a?preview=1",)


class TestPurgeScope:
    """PurgeScope: flag values combine like the bit mask they model."""

    def test_both_contains_live_and_draft(self) -> None:
        assert PurgeScope.LIVE in PurgeScope.BOTH
        assert PurgeScope.DRAFT in PurgeScope.BOTH
        assert PurgeScope.LIVE | PurgeScope.DRAFT is PurgeScope.BOTH

    def test_live_excludes_draft(self) -> None:
        assert PurgeScope.DRAFT not in PurgeScope.LIVE


class TestPurgeDecision:
    """PurgeDecision: frozen decision value."""

    def test_everything(self) -> None:
        assert PurgeDecision.everything().full is True

    def test_scoped(self) -> None:
        decision = PurgeDecision.scoped(PurgeScope.DRAFT)
        assert decision.full is False
        assert decision.scope is PurgeScope.DRAFT

    def test_frozen(self) -> None:
        decision = PurgeDecision.everything()
        with pytest.raises(AttributeError):
            decision.full = False  # type: ignore[misc]


class TestPurgeRequest:
    def test_len_and_iter(self) -> None:
        request = PurgeRequest(urls=("/a", "/b"))
        assert len(request) == 2
        assert list(request) == ["/a", "/b"]
