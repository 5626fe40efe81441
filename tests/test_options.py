"""Unit tests for the Options configuration value."""

import dataclasses

import pytest

from concat.options import Options


def test_defaults():
    options = Options()
    assert options.extensions == frozenset()
    assert options.include_patterns == ()
    assert options.exclude_patterns == ()
    assert not options.include_hidden
    assert not options.include_tree
    assert not options.plain_text
    assert options.output_path is None
    assert options.roots == (".",)
    assert options.recursive


def test_collections_are_normalized():
    options = Options(extensions=["rs", "rs", "toml"], include_patterns=["*.rs"], roots=["src", "Cargo.toml"])
    assert options.extensions == frozenset({"rs", "toml"})
    assert options.include_patterns == ("*.rs",)
    assert options.roots == ("src", "Cargo.toml")


def test_empty_roots_default_to_current_directory():
    assert Options(roots=[]).roots == (".",)


def test_options_are_immutable():
    options = Options()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.plain_text = True  # type: ignore[misc]


@pytest.mark.parametrize(
    "plain_text, output_path, expected_path, expected_format",
    [
        (False, None, "_concat-output.xml", "xml"),
        (True, None, "_concat-output.txt", "text"),
        (False, "bundle.txt", "bundle.txt", "xml"),
        (True, "out/bundle.md", "out/bundle.md", "text"),
    ],
)
def test_resolved_output(plain_text, output_path, expected_path, expected_format):
    options = Options(plain_text=plain_text, output_path=output_path)
    assert options.resolved_output_path == expected_path
    assert options.output_format == expected_format
