"""
Compatibility Scorer - weighted attribute matching between two profiles (100 points).

Seven independent factors, each contributing up to its weight:
1. age (20) - continuous: max(0, 20 - |age difference|), match flag iff diff <= 5
2. education (15) - same education level
3. location (15) - same city = 15, same state = 7, otherwise 0
4. religious_commitment (20) - same religious level
5. marriage_type (10) - same marriage type preference
6. children (10) - same family-planning preference
7. employment (10) - both profiles have a current job (values not compared)

Factors are additive and order-independent. A value missing on either side
always lands in the factor's non-match branch; no factor raises or stops
the computation. The total is clamped to [0, 100].

All functions are pure: no I/O, no shared mutable state, safe to call
concurrently across many candidate pairs.
"""

import logging
from typing import Iterable, Optional

from zawaj.constants import (
    AGE_MATCH_MAX_DIFFERENCE,
    MAX_COMPATIBILITY_SCORE,
    MIN_COMPATIBILITY_SCORE,
)
from zawaj.schemas.results import (
    CategoryScore,
    CompatibilityDetails,
    CompatibilityResult,
    FactorResult,
    RankedCandidate,
)
from zawaj.scorers.weight_registry import get_weights, validate_weights
from zawaj.utils.profile_fields import (
    ProfileLike,
    as_number,
    as_profile_data,
    get_field,
    get_section,
    has_value,
)
from zawaj.utils.rounding import round_half_up

logger = logging.getLogger(__name__)

# (factor, namespace, key, truthy_required) for the exact-equality factors
EQUALITY_FACTORS = [
    ("education", "education", "level", False),
    ("religious_commitment", "religiousInfo", "religiousLevel", False),
    ("marriage_type", "preferences", "marriageType", False),
    ("children", "preferences", "children", True),
]

# details keys per equality factor, e.g. {"education1": ..., "education2": ...}
DETAIL_PREFIXES = {
    "education": "education",
    "religious_commitment": "religious",
    "marriage_type": "marriageType",
    "children": "children",
}


class CompatibilityScorer:
    """Scores two profiles against each other.

    Weights default to the registry (zawaj/defaults/compatibility_weights.yaml);
    pass an explicit dict to score with custom weights.
    """

    def __init__(self, weights: Optional[dict[str, int]] = None):
        if weights is not None:
            validate_weights(weights)
            self.weights = dict(weights)
        else:
            self.weights = get_weights()

    def evaluate(self, profile_a: ProfileLike, profile_b: ProfileLike) -> CompatibilityResult:
        """Compute the weighted compatibility score and per-factor breakdown."""
        data_a = as_profile_data(profile_a)
        data_b = as_profile_data(profile_b)

        equality = {
            factor: self._score_equality(factor, namespace, key, truthy_required, data_a, data_b)
            for factor, namespace, key, truthy_required in EQUALITY_FACTORS
        }
        factors = [
            self._score_age(data_a, data_b),
            equality["education"],
            self._score_location(data_a, data_b),
            equality["religious_commitment"],
            equality["marriage_type"],
            equality["children"],
            self._score_employment(data_a, data_b),
        ]

        total = sum(f.points for f in factors)
        score = max(MIN_COMPATIBILITY_SCORE, min(MAX_COMPATIBILITY_SCORE, round_half_up(total)))
        logger.debug(f"Compatibility score {score} [matched={[f.factor for f in factors if f.match]}]")
        return CompatibilityResult(score=score, factors=factors)

    def details(self, profile_a: ProfileLike, profile_b: ProfileLike) -> CompatibilityDetails:
        """Reshape evaluate() output into matching/non-matching and per-category groups."""
        result = self.evaluate(profile_a, profile_b)

        category_scores: dict[str, CategoryScore] = {}
        for factor in result.factors:
            category = category_scores.setdefault(factor.factor, CategoryScore())
            category.total_weight += factor.weight
            category.earned_points += factor.points
            category.factors.append(factor)

        return CompatibilityDetails(
            overall_score=result.score,
            matching_factors=[f for f in result.factors if f.match],
            non_matching_factors=[f for f in result.factors if not f.match],
            category_scores=category_scores,
            details=result.factors,
        )

    def rank(
        self,
        profile: ProfileLike,
        candidates: Iterable[ProfileLike],
        limit: Optional[int] = None,
        min_score: int = 0,
    ) -> list[RankedCandidate]:
        """Score one profile against many candidates, best first.

        Ties keep the input order. Candidates scoring below min_score are dropped.
        """
        ranked = []
        for index, candidate in enumerate(candidates):
            result = self.evaluate(profile, candidate)
            if result.score >= min_score:
                ranked.append(RankedCandidate(index=index, candidate=candidate, result=result))
        ranked.sort(key=lambda r: r.score, reverse=True)
        if limit is not None:
            ranked = ranked[:limit]
        logger.debug(f"Ranked {len(ranked)} candidates [min_score={min_score} limit={limit}]")
        return ranked

    def _score_age(self, data_a, data_b) -> FactorResult:
        weight = self.weights["age"]
        age1 = as_number(get_field(data_a, "basicInfo", "age"))
        age2 = as_number(get_field(data_b, "basicInfo", "age"))
        if age1 is None or age2 is None:
            return FactorResult(
                factor="age",
                weight=weight,
                points=0,
                match=False,
                details={"age1": age1, "age2": age2, "difference": None},
            )

        difference = abs(age1 - age2)
        return FactorResult(
            factor="age",
            weight=weight,
            points=max(0, weight - difference),
            match=difference <= AGE_MATCH_MAX_DIFFERENCE,
            details={"age1": age1, "age2": age2, "difference": difference},
        )

    def _score_location(self, data_a, data_b) -> FactorResult:
        weight = self.weights["location"]
        location1 = get_section(data_a, "location") or {}
        location2 = get_section(data_b, "location") or {}
        city1, city2 = location1.get("city"), location2.get("city")
        state1, state2 = location1.get("state"), location2.get("state")

        if has_value(city1) and has_value(city2) and city1 == city2:
            return FactorResult(
                factor="location",
                weight=weight,
                points=weight,
                match=True,
                details={"city1": city1, "city2": city2},
            )
        if has_value(state1) and has_value(state2) and state1 == state2:
            # Same state, different city: half credit, not a match
            return FactorResult(
                factor="location",
                weight=weight,
                points=weight // 2,
                match=False,
                details={"state1": state1, "state2": state2},
            )
        return FactorResult(
            factor="location",
            weight=weight,
            points=0,
            match=False,
            details={"city1": city1, "city2": city2, "state1": state1, "state2": state2},
        )

    def _score_equality(self, factor, namespace, key, truthy_required, data_a, data_b) -> FactorResult:
        weight = self.weights[factor]
        value1 = get_field(data_a, namespace, key)
        value2 = get_field(data_b, namespace, key)
        if truthy_required:
            present = bool(value1) and bool(value2)
        else:
            present = has_value(value1) and has_value(value2)
        match = present and value1 == value2

        prefix = DETAIL_PREFIXES[factor]
        return FactorResult(
            factor=factor,
            weight=weight,
            points=weight if match else 0,
            match=match,
            details={f"{prefix}1": value1, f"{prefix}2": value2},
        )

    def _score_employment(self, data_a, data_b) -> FactorResult:
        # Presence on both sides is enough; job titles are not compared
        weight = self.weights["employment"]
        job1 = get_field(data_a, "professional", "currentJob")
        job2 = get_field(data_b, "professional", "currentJob")
        match = has_value(job1) and has_value(job2)
        return FactorResult(
            factor="employment",
            weight=weight,
            points=weight if match else 0,
            match=match,
            details={"job1": job1, "job2": job2},
        )


def calculate_compatibility(profile_a: ProfileLike, profile_b: ProfileLike) -> CompatibilityResult:
    """Compatibility score (0-100) and factor breakdown using the configured weights."""
    return CompatibilityScorer().evaluate(profile_a, profile_b)


def get_compatibility_details(profile_a: ProfileLike, profile_b: ProfileLike) -> CompatibilityDetails:
    """Matching/non-matching factors and per-category earned points."""
    return CompatibilityScorer().details(profile_a, profile_b)


def rank_candidates(
    profile: ProfileLike,
    candidates: Iterable[ProfileLike],
    limit: Optional[int] = None,
    min_score: int = 0,
) -> list[RankedCandidate]:
    """Candidates sorted by descending compatibility with profile."""
    return CompatibilityScorer().rank(profile, candidates, limit=limit, min_score=min_score)
