"""Unit tests for the include and exclude pattern rules."""

from concat.selection_rules.pattern_rules import ExcludePatternRule, IncludePatternRule


class TestIncludePatternRule:
    def test_no_patterns_accepts_everything(self):
        rule = IncludePatternRule()
        assert not rule.exclude("./anything")
        assert not rule.is_active()

    def test_path_must_match_at_least_one_pattern(self):
        rule = IncludePatternRule(["*.rs", "*/Cargo.toml"])
        assert not rule.exclude("./src/main.rs")
        assert not rule.exclude("./Cargo.toml")
        assert rule.exclude("./README.md")

    def test_patterns_match_full_path(self):
        rule = IncludePatternRule(["src/*"])
        assert rule.exclude("./src/main.rs")
        assert not rule.exclude("src/main.rs")


class TestExcludePatternRule:
    def test_no_patterns_rejects_nothing(self):
        rule = ExcludePatternRule()
        assert not rule.exclude("./src/main.rs")
        assert not rule.is_active()

    def test_any_matching_pattern_rejects(self):
        rule = ExcludePatternRule(["*/target/*", "*.lock"])
        assert rule.exclude("./target/debug/app.rs")
        assert rule.exclude("./Cargo.lock")
        assert not rule.exclude("./src/main.rs")

    def test_any_match(self):
        rule = ExcludePatternRule(["*.log"])
        assert rule.any_match("server.log")
        assert not rule.any_match("server.log.1")
