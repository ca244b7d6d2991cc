"""
Property-Based Tests Using Hypothesis

Tests invariants of the generation core across randomly generated inputs.
Validates digest derivation ranges, PRNG determinism, scoring bounds and the
output contract of every registered algorithm.
"""
import pytest                                                 # Testing framework
from hypothesis import given, strategies as st, assume, settings, HealthCheck  # Property testing

from logomark.base_params import generate_base_params         # Shared parameter bundle
from logomark.colors import normalize_hex                     # Color validation
from logomark.controller import render_preview                # Single-document renderer
from logomark.derive import DERIVED_FIELDS, derive_params_from_hash  # Digest slicing
from logomark.errors import InputError                        # Validation error
from logomark.quality import calculate_quality_score, command_complexity, path_complexity  # Scoring
from logomark.seed import create_seeded_random, generate_hash_params_sync  # Hashing and PRNG
from logomark.algorithms.registry import get_algorithm, list_registered_algorithms  # Registry


# Custom strategies for bounded data generation
@st.composite
def digest_strategy(draw):                                    # Generate hex digests
    """Strategy for generating hex digests of any non-empty length."""  # Strategy purpose
    size = draw(st.integers(min_value=1, max_value=96))       # Digest length in hex chars
    return draw(st.text(alphabet="0123456789abcdefABCDEF", min_size=size, max_size=size))


@st.composite
def sha_digest_strategy(draw):                                # Generate full SHA-256 digests
    """Strategy for 64-char digests like the ones the hasher produces."""  # Strategy purpose
    return draw(st.text(alphabet="0123456789abcdef", min_size=64, max_size=64))


@st.composite
def brand_strategy(draw):                                     # Generate brand names
    """Strategy for non-blank brand names including digits and symbols."""  # Strategy purpose
    name = draw(st.text(
        alphabet=st.characters(min_codepoint=32, max_codepoint=0x24F),
        min_size=1,
        max_size=24,
    ))
    assume(name.strip())                                      # Blank brands are rejected upstream
    return name


@st.composite
def color_strategy(draw):                                     # Generate hex colors
    """Strategy for #rrggbb colors."""                        # Strategy purpose
    value = draw(st.integers(min_value=0, max_value=0xFFFFFF))
    return f"#{value:06x}"


class TestDerivationProperties:                               # Digest slicing invariants
    """Property-based tests for hash-derived parameters."""   # Class purpose

    @given(digest_strategy())
    @settings(max_examples=300, deadline=1000)
    def test_every_field_in_range(self, digest):              # Range safety
        """For any hex digest, every derived field lands inside its range."""  # Test purpose
        derived = derive_params_from_hash(digest)
        for name, spec in DERIVED_FIELDS.items():
            value = getattr(derived, name)
            if spec.kind == "choice":
                assert value in spec.choices, f"{name}={value}"
            else:
                assert spec.lo <= value <= spec.hi, f"{name}={value} for {digest}"

    @given(digest_strategy())
    @settings(max_examples=100, deadline=1000)
    def test_derivation_is_pure(self, digest):                # Determinism
        """Deriving twice from the same digest gives equal records."""  # Test purpose
        assert derive_params_from_hash(digest) == derive_params_from_hash(digest)

    @given(st.text(min_size=1, max_size=20))
    @settings(max_examples=100, deadline=1000)
    def test_non_hex_rejected(self, text):                    # Validation
        """Anything containing a non-hex character raises InputError."""  # Test purpose
        assume(any(ch not in "0123456789abcdefABCDEF" for ch in text.strip()) or not text.strip())
        with pytest.raises(InputError):
            derive_params_from_hash(text)


class TestPrngProperties:                                     # Seeded PRNG invariants
    """Property-based tests for the seeded random source."""  # Class purpose

    @given(sha_digest_strategy(), st.integers(min_value=1, max_value=200))
    @settings(max_examples=100, deadline=1000)
    def test_same_seed_same_sequence(self, digest, n):        # Replay
        """N calls on two generators with one seed yield the same N values."""  # Test purpose
        a, b = create_seeded_random(digest), create_seeded_random(digest)
        seq = [a() for _ in range(n)]
        assert seq == [b() for _ in range(n)]
        assert all(0.0 <= v < 1.0 for v in seq)

    @given(sha_digest_strategy())
    @settings(max_examples=100, deadline=1000)
    def test_base_params_bounded(self, digest):               # Base bundle ranges
        """The shared bundle respects its documented ranges for any seed."""  # Test purpose
        base = generate_base_params(create_seeded_random(digest))
        assert 2 <= base.stroke_width <= 6
        assert 3 <= base.segment_count <= 10
        assert 1 <= base.layer_count <= 5
        assert 0.7 <= base.base_opacity <= 1.0


class TestHashingProperties:                                  # Brand hashing invariants
    """Property-based tests for brand hashing."""             # Class purpose

    @given(brand_strategy(), st.sampled_from(["general", "finance", "technology"]))
    @settings(max_examples=100, deadline=1000)
    def test_hash_fixed_length_and_stable(self, brand, category):  # Stable digest
        """The digest has a fixed length and depends only on its inputs."""  # Test purpose
        a = generate_hash_params_sync(brand, category, "salt")
        b = generate_hash_params_sync(brand, category, "salt")
        assert len(a.hash_hex) == 64
        assert a.hash_hex == b.hash_hex


class TestScoringProperties:                                  # Quality evaluator invariants
    """Property-based tests for the quality evaluator."""     # Class purpose

    @given(st.integers(min_value=100, max_value=5000))
    @settings(max_examples=100, deadline=1000)
    def test_command_complexity_decreasing_past_band(self, n):  # Monotone tail
        """Past the optimal band, one more command always scores lower."""  # Test purpose
        assert command_complexity(n + 1) < command_complexity(n)

    @given(st.integers(min_value=20, max_value=2000))
    @settings(max_examples=100, deadline=1000)
    def test_path_complexity_decreasing_past_band(self, n):  # Monotone tail
        """Past the optimal band, one more path always scores lower."""  # Test purpose
        assert path_complexity(n + 1) < path_complexity(n)


ALGORITHMS = list_registered_algorithms()                     # Every registered generator


class TestAlgorithmProperties:                                # Output contract
    """Property-based tests across every registered algorithm."""  # Class purpose

    @given(st.sampled_from(ALGORITHMS), brand_strategy(), color_strategy())
    @settings(max_examples=150, deadline=None, suppress_health_check=[HealthCheck.too_slow])
    def test_preview_contract(self, name, seed, color):       # Canvas invariant
        """Any algorithm, seed and color yields a valid, scoreable document."""  # Test purpose
        algo = get_algorithm(name)
        doc = render_preview(algo, color, seed=seed)
        assert 'viewBox="0 0 100 100"' in doc
        assert "<path" in doc
        assert "Gradient" in doc
        assert render_preview(algo, color, seed=seed) == doc  # Byte-identical replay

        digest = generate_hash_params_sync(seed, algo.default_category).hash_hex
        metrics = calculate_quality_score(doc, derive_params_from_hash(digest))
        assert 0 <= metrics.score <= 100

    @given(color_strategy())
    @settings(max_examples=50, deadline=1000)
    def test_normalized_colors_round_trip(self, color):       # Color normalization
        """Normalizing a normalized color is a no-op."""      # Test purpose
        assert normalize_hex(normalize_hex(color)) == color
