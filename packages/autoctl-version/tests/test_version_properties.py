# SPDX-License-Identifier: MIT
"""Property-based tests for parsing, ordering and incrementing.

These tests verify that:
- Rendering a parsed version reproduces the input exactly
- finalize_version() drops pre-release and build and keeps MAJOR.MINOR.PATCH
- compare() is a total order consistent with version_key()
- A release outranks every one of its pre-releases
- Every increment produces a valid, strictly greater version
"""

from __future__ import annotations

from hypothesis import given, settings, strategies as st, HealthCheck

from autoctl_version import (
    ReleaseType,
    bump,
    compare,
    compare_with_build_meta,
    parse,
    version_key,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

numbers = st.integers(min_value=0, max_value=2**70)

numeric_identifiers = st.integers(min_value=0, max_value=10**6).map(str)

alphanumeric_identifiers = st.from_regex(r"[0-9]*[a-zA-Z-][0-9a-zA-Z-]{0,6}", fullmatch=True)

prerelease_identifiers = st.one_of(numeric_identifiers, alphanumeric_identifiers)

build_identifiers = st.from_regex(r"[0-9a-zA-Z-]{1,8}", fullmatch=True)

tags = st.sampled_from(["", "alpha", "beta", "rc", "dev"])


@st.composite
def version_strings(draw, prerelease=None):
    """Generate a valid semantic version string."""
    text = f"{draw(numbers)}.{draw(numbers)}.{draw(numbers)}"
    if prerelease is None:
        prerelease = draw(st.booleans())
    if prerelease:
        parts = draw(st.lists(prerelease_identifiers, min_size=1, max_size=4))
        text += "-" + ".".join(parts)
    if draw(st.booleans()):
        parts = draw(st.lists(build_identifiers, min_size=1, max_size=3))
        text += "+" + ".".join(parts)
    return text


# =============================================================================
# Properties
# =============================================================================


@given(version_strings())
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_round_trip(text: str) -> None:
    """Rendering a parsed version gives back the input."""
    assert str(parse(text)) == text


@given(version_strings(), st.lists(prerelease_identifiers, min_size=1, max_size=3))
@settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
def test_finalize_keeps_core(text: str, parts: list[str]) -> None:
    """finalize_version() has no pre-release or build and reparses to the same core."""
    version = parse(text)
    final = version.finalize_version()
    assert "-" not in final and "+" not in final

    rebuilt = parse(f"{final}-{'.'.join(parts)}+meta")
    assert (rebuilt.major, rebuilt.minor, rebuilt.patch) == (
        version.major,
        version.minor,
        version.patch,
    )


@given(version_strings(prerelease=True))
@settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
def test_release_outranks_prerelease(text: str) -> None:
    """A release has higher precedence than any of its pre-releases."""
    version = parse(text)
    assert compare(version.finalize_version(), version) == 1
    assert compare(version, version.finalize_version()) == -1


@given(version_strings(), version_strings())
@settings(max_examples=200, suppress_health_check=[HealthCheck.too_slow])
def test_antisymmetric(a: str, b: str) -> None:
    """compare(a, b) is the negation of compare(b, a)."""
    result = compare(a, b)
    assert result in (-1, 0, 1)
    assert compare(b, a) == -result
    assert compare_with_build_meta(b, a) == -compare_with_build_meta(a, b)


@given(version_strings(), version_strings(), version_strings())
@settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
def test_transitive(a: str, b: str, c: str) -> None:
    """Sorting three versions gives a chain consistent with compare()."""
    low, mid, high = sorted([a, b, c], key=version_key)
    assert compare(low, mid) <= 0
    assert compare(mid, high) <= 0
    assert compare(low, high) <= 0


@given(version_strings(), version_strings())
@settings(max_examples=100, suppress_health_check=[HealthCheck.too_slow])
def test_key_matches_compare(a: str, b: str) -> None:
    """version_key() orders exactly like compare()."""
    key_a, key_b = version_key(a), version_key(b)
    expected = (key_a > key_b) - (key_a < key_b)
    assert compare(a, b) == expected

    key_a, key_b = version_key(a, build_meta=True), version_key(b, build_meta=True)
    expected = (key_a > key_b) - (key_a < key_b)
    assert compare_with_build_meta(a, b) == expected


@given(version_strings(), st.sampled_from(list(ReleaseType)), tags, st.booleans())
@settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
def test_increment_moves_forward(
    text: str, release: ReleaseType, identifier: str, identifier_base: bool
) -> None:
    """Every increment yields a valid version that the original precedes.

    Steering an existing pre-release to a tag may restart it at a lower
    <tag>.<base>, so tagged pre-release bumps are excluded from the
    ordering check.
    """
    original = parse(text)
    result = bump(original, release, identifier, identifier_base)

    assert str(parse(str(result))) == str(result)
    assert str(original) == text

    retags = release is ReleaseType.PRERELEASE and original.is_prerelease and identifier != ""
    if not retags:
        assert compare(original, result) == -1
