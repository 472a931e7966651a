# SPDX-License-Identifier: MIT
"""Property-based tests for parsing round-trips and ordering laws.

These tests verify that:
- Every valid API version string renders back to itself after parsing
- The regex validators agree with the parser
- compare_versions is reflexive, antisymmetric and transitive
- Stable versions outrank every pre-release, beta outranks every alpha
- sort_versions agrees with compare_versions
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st

from kube_version import (
    ApiVersion,
    ParseError,
    Prerelease,
    Stage,
    Version,
    compare_versions,
    is_valid_api_version,
    parse_api_version,
    sort_versions,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

positive_numbers = st.integers(min_value=1, max_value=10**6)

# Groups: anything without "/", plus realistic names
groups = st.one_of(
    st.none(),
    st.sampled_from(["apps", "batch", "extensions", "policy", "certificates.k8s.io"]),
    st.text(min_size=1, max_size=20).filter(lambda s: "/" not in s),
)


@st.composite
def versions(draw):
    """Generate a valid Version."""
    major = draw(positive_numbers)
    stage = draw(st.sampled_from([None, Stage.ALPHA, Stage.BETA]))
    if stage is None:
        return Version(major)
    return Version(major, Prerelease(stage, draw(positive_numbers)))


@st.composite
def api_versions(draw):
    """Generate a valid ApiVersion."""
    return ApiVersion(draw(groups), draw(versions()))


# =============================================================================
# Round-trip properties
# =============================================================================


class TestRoundTrip:
    """Rendering and re-parsing yields an identical value."""

    @given(api_versions())
    @settings(max_examples=200)
    def test_parse_render_round_trip(self, api_version):
        text = str(api_version)
        parsed = parse_api_version(text)
        assert parsed == api_version
        assert str(parsed) == text

    @given(api_versions())
    @settings(max_examples=200)
    def test_regex_accepts_rendered(self, api_version):
        assert is_valid_api_version(str(api_version)) is True

    @given(st.text(alphabet="v0123456789alphbet/ x", max_size=16))
    @settings(max_examples=500)
    def test_regex_agrees_with_parser(self, text):
        try:
            parse_api_version(text)
        except ParseError:
            assert is_valid_api_version(text) is False
        else:
            assert is_valid_api_version(text) is True


# =============================================================================
# Ordering properties
# =============================================================================


class TestOrderingLaws:
    """compare_versions is a strict weak ordering."""

    @given(api_versions())
    def test_reflexive(self, a):
        assert compare_versions(a, a) == 0

    @given(api_versions(), api_versions())
    def test_antisymmetric(self, a, b):
        assert compare_versions(a, b) == -compare_versions(b, a)

    @given(api_versions(), api_versions(), api_versions())
    @settings(max_examples=300)
    def test_transitive(self, a, b, c):
        if compare_versions(a, b) == -1 and compare_versions(b, c) == -1:
            assert compare_versions(a, c) == -1
        if compare_versions(a, b) == 0 and compare_versions(b, c) == 0:
            assert compare_versions(a, c) == 0

    @given(positive_numbers, versions().filter(lambda v: v.is_prerelease))
    def test_stable_dominates(self, major, prerelease_version):
        assert compare_versions(Version(major), prerelease_version) == 1

    @given(positive_numbers, positive_numbers, positive_numbers, positive_numbers)
    def test_beta_dominates_alpha(self, beta_major, beta_minor, alpha_major, alpha_minor):
        beta = Version(beta_major, Prerelease(Stage.BETA, beta_minor))
        alpha = Version(alpha_major, Prerelease(Stage.ALPHA, alpha_minor))
        assert compare_versions(beta, alpha) == 1

    @given(groups, groups, versions())
    def test_group_ignored(self, group1, group2, version):
        assert compare_versions(ApiVersion(group1, version), ApiVersion(group2, version)) == 0


class TestSortProperties:
    """sort_versions produces an ordering consistent with compare_versions."""

    @given(st.lists(api_versions(), max_size=12))
    def test_sorted_most_preferred_first(self, items):
        result = sort_versions(items)
        assert len(result) == len(items)
        for earlier, later in zip(result, result[1:]):
            assert compare_versions(earlier, later) >= 0

    @given(st.lists(api_versions(), max_size=12))
    def test_directions_are_mirrors_for_distinct_ranks(self, items):
        ascending = sort_versions(items, most_preferred_first=False)
        descending = sort_versions(items)
        ranks_up = [a.version.rank for a in ascending]
        ranks_down = [a.version.rank for a in descending]
        assert ranks_up == list(reversed(ranks_down))
