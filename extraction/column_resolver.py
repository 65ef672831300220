"""
Column resolution: map raw spreadsheet headers to canonical fields.

Headers arrive with arbitrary capitalization, accents and surrounding spaces.
Each canonical field has an ordered list of candidate names (domain.synonyms);
the first candidate found wins, trying an exact match before an accent- and
case-insensitive one. Unmatched fields stay unresolved (None) and the extractor
falls back to defaults for them.

diagnose_columns() is a reporting aid: it profiles every column and ranks the
ones that look like product descriptions, so a user can see why a description
was or was not found. It never changes the resolved mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from domain.canonical import CanonicalField, ColumnMap, RawRow
from domain.synonyms import COLUMN_SYNONYMS, DESCRIPTION_NAME_HINTS
from fields.normalization import has_letter, is_blank, normalize_header


def find_column(headers: Iterable[str], candidates: Sequence[str]) -> Optional[str]:
    """Return the header matching the first candidate (exact, then normalized), or None."""
    headers = list(headers)
    if not headers or not candidates:
        return None

    present = set(headers)
    for cand in candidates:
        if cand in present:
            return cand

    normalized = {normalize_header(c) for c in candidates}
    for header in headers:
        if normalize_header(header) in normalized:
            return header

    return None


def resolve(
    headers: Iterable[str],
    candidates: Mapping[CanonicalField, Sequence[str]] = COLUMN_SYNONYMS,
) -> ColumnMap:
    """Bind every canonical field to at most one header (None when unresolved)."""
    headers = list(headers)
    return {f: find_column(headers, candidates.get(f, ())) for f in CanonicalField}


def collect_headers(rows: Iterable[RawRow]) -> List[str]:
    """Ordered union of the headers of all rows."""
    seen: Dict[str, None] = {}
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


@dataclass
class ColumnProfile:
    name: str
    filled: int = 0
    samples: List[Any] = field(default_factory=list)
    score: float = 0.0

    def fill_ratio(self, total: int) -> float:
        return self.filled / total if total else 0.0


@dataclass
class ColumnReport:
    total_rows: int
    columns: List[ColumnProfile]
    description_candidates: List[ColumnProfile]


def diagnose_columns(rows: Sequence[RawRow], max_samples: int = 3) -> ColumnReport:
    """
    Profile each column and rank likely description columns.

    Score = 10 if the header hints at a name/description, +5 if a sampled value is
    text longer than 3 chars with a letter, + 10 * fill ratio.
    """
    profiles: Dict[str, ColumnProfile] = {}
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        for key, value in row.items():
            prof = profiles.setdefault(key, ColumnProfile(name=key))
            if is_blank(value):
                continue
            prof.filled += 1
            if len(prof.samples) < max_samples:
                prof.samples.append(value)

    total = len(rows)
    candidates: List[ColumnProfile] = []
    for prof in profiles.values():
        norm = normalize_header(prof.name)
        name_hit = any(h in norm for h in DESCRIPTION_NAME_HINTS)
        content_hit = any(
            isinstance(s, str) and len(s) > 3 and has_letter(s) for s in prof.samples
        )
        if not (name_hit or content_hit):
            continue
        prof.score = (10 if name_hit else 0) + (5 if content_hit else 0) + 10 * prof.fill_ratio(total)
        candidates.append(prof)

    candidates.sort(key=lambda p: p.score, reverse=True)
    return ColumnReport(total_rows=total, columns=list(profiles.values()), description_candidates=candidates)
