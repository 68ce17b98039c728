"""Provenance helpers for synthesized transport data."""

from datetime import UTC, datetime

from backend.multicity.models.common import Provenance


def provenance_for_estimate(source: str, ref_id: str | None = None) -> Provenance:
    """Create provenance for data computed from static tables.

    Args:
        source: Source identifier (e.g., "estimate.flight")
        ref_id: Optional reference ID (e.g., "paris_rome")

    Returns:
        Provenance with source=tool-specific string, fetched_at=now(UTC), cache_hit=False
    """
    return Provenance(
        source=f"tool.{source}",
        ref_id=f"{source}/{ref_id}" if ref_id else source,
        source_url=f"estimate://{source}/{ref_id}" if ref_id else f"estimate://{source}",
        fetched_at=datetime.now(UTC),
        cache_hit=False,
    )
