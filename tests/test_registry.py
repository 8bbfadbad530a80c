"""
Tests for the variable registry and placeholder encoders.
"""

import threading

import pytest

from themestyle.registry import VariableRegistry, hash_generate


class TestColorPlaceholders:
    """Incrementing transparent hex placeholders."""

    def test_first_placeholders_follow_sequence(self, registry):
        assert registry.resolve_color_placeholder("$primary") == "#00000100"
        assert registry.resolve_color_placeholder("$accent") == "#00000200"

    def test_idempotent(self, registry):
        first = registry.resolve_color_placeholder("$primary")
        second = registry.resolve_color_placeholder("$primary")
        assert first == second
        assert len(registry) == 1

    def test_hex_uses_uppercase_digits(self, registry):
        for index in range(10):
            registry.resolve_color_placeholder(f"$c{index}")
        assert registry.resolve_color_placeholder("$eleventh") == "#00000B00"

    def test_reverse_lookup_strips_sigil(self, registry):
        placeholder = registry.resolve_color_placeholder("$primary")
        assert registry.name_for(placeholder) == "primary"


class TestLengthPlaceholders:
    """Opaque pixel-literal placeholders."""

    def test_token_is_pixel_literal(self, registry):
        assert registry.resolve_length_placeholder("$gutter") == "500000px"
        assert registry.resolve_length_placeholder("$radius") == "500001px"

    def test_idempotent(self, registry):
        assert registry.resolve_length_placeholder("$gutter") == registry.resolve_length_placeholder("$gutter")

    def test_default_generator_advances(self):
        generate = hash_generate()
        first = int(generate()[:-2])
        assert int(generate()[:-2]) == first + 1

    def test_colliding_factory_tokens_are_skipped(self):
        tokens = iter(["7px", "7px", "8px"])
        registry = VariableRegistry(token_factory=lambda: next(tokens))
        assert registry.resolve_length_placeholder("$a") == "7px"
        assert registry.resolve_length_placeholder("$b") == "8px"


def test_distinct_names_never_share_a_placeholder(registry):
    placeholders = [registry.resolve_color_placeholder(f"$color{i}") for i in range(50)]
    placeholders += [registry.resolve_length_placeholder(f"$size{i}") for i in range(50)]
    assert len(set(placeholders)) == 100


def test_seen_name_keeps_first_discipline(registry):
    placeholder = registry.resolve_color_placeholder("$primary")
    assert registry.resolve_length_placeholder("$primary") == placeholder


def test_fallback_pairs_placeholder_with_itself(registry):
    placeholder = registry.resolve_color_placeholder("$primary")
    assert registry.resolve_color_placeholder("$primary", "red") == f"{placeholder} {placeholder}"
    assert registry.resolve_length_placeholder("$gutter", "4px") == "500000px 500000px"


def test_name_for_unknown_and_non_string(registry):
    assert registry.name_for("#FFFFFF") is None
    assert registry.name_for(12) is None
    assert registry.name_for({"width": 1}) is None


def test_reset_clears_bindings_and_sequence(registry):
    registry.resolve_color_placeholder("$primary")
    registry.resolve_color_placeholder("$accent")
    registry.reset()

    assert len(registry) == 0
    assert "$primary" not in registry
    assert registry.name_for("#00000100") is None
    assert registry.resolve_color_placeholder("$other") == "#00000100"


def test_invalid_variable_name(registry):
    with pytest.raises(ValueError):
        registry.resolve_color_placeholder("")


def test_concurrent_first_resolution_allocates_once():
    registry = VariableRegistry()
    barrier = threading.Barrier(8)
    results = []

    def worker():
        barrier.wait()
        results.append(registry.resolve_length_placeholder("$shared"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(results)) == 1
    assert len(registry) == 1


def test_placeholder_for(registry):
    assert registry.placeholder_for("$primary") is None
    placeholder = registry.resolve_color_placeholder("$primary")
    assert registry.placeholder_for("$primary") == placeholder
    assert "$primary" in registry


def test_module_level_encoders_share_default_registry(shared_registry):
    from themestyle.registry import resolve_color_variable, resolve_length_variable

    color = resolve_color_variable("$module_color")
    length = resolve_length_variable("$module_length")
    assert shared_registry.name_for(color) == "module_color"
    assert shared_registry.name_for(length) == "module_length"


def test_exhausted_token_factory_is_reported():
    registry = VariableRegistry(token_factory=lambda: "7px")
    assert registry.resolve_length_placeholder("$first") == "7px"
    with pytest.raises(ValueError, match="token factory"):
        registry.resolve_length_placeholder("$second")
    assert "$second" not in registry
