"""Fuzzy Filter — ranks candidate strings against partial user input.

Invariants:
    - Pure functions: no IO, no async, inputs never mutated
    - Match = case-insensitive, in-order subsequence of the pattern in the candidate
    - Score grows with runs of consecutive matched characters; exact match ranks first
    - Ranking: score descending, then original index ascending (stable)
    - Empty pattern matches everything with equal score → original order returned

Design Decisions:
    - Run scoring: each consecutive hit adds 1 + current run score, a miss resets
      the run to 0 — long contiguous hits dominate scattered ones
    - Rendered form wraps matched characters in pre/post markers for display only;
      filter() callers that need the candidate use FuzzyResult.original
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class FuzzyResult:
    """One matched candidate."""
    original: str
    rendered: str
    score: float
    index: int


def fuzzy_match(
    pattern: str, candidate: str, pre: str = "", post: str = "",
) -> tuple[float, str] | None:
    """Score one candidate; returns (score, rendered) or None when it does not match."""
    compare = candidate.lower()
    lowered = pattern.lower()

    pattern_idx = 0
    total_score = 0
    run_score = 0
    rendered: list[str] = []

    for idx, ch in enumerate(candidate):
        if pattern_idx < len(lowered) and compare[idx] == lowered[pattern_idx]:
            rendered.append(f"{pre}{ch}{post}")
            pattern_idx += 1
            run_score += 1 + run_score
        else:
            rendered.append(ch)
            run_score = 0
        total_score += run_score

    if pattern_idx != len(lowered):
        return None
    score: float = math.inf if lowered and compare == lowered else total_score
    return score, "".join(rendered)


def fuzzy_filter(
    pattern: str, candidates: list[str], pre: str = "", post: str = "",
) -> list[FuzzyResult]:
    """All matching candidates, best first."""
    results: list[FuzzyResult] = []
    for index, candidate in enumerate(candidates):
        matched = fuzzy_match(pattern, candidate, pre, post)
        if matched is None:
            continue
        score, rendered = matched
        results.append(FuzzyResult(candidate, rendered, score, index))
    results.sort(key=lambda r: (-r.score, r.index))
    return results


def filter_names(pattern: str, candidates: list[str]) -> list[str]:
    """Matching candidates as their original strings, best first."""
    return [result.original for result in fuzzy_filter(pattern, candidates)]
