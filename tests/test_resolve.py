"""Tests for resolve(): include/exclude expansion against a directory."""

import os
import stat

import pytest

from dotgh import PatternError, ResolutionIOError, resolve


@pytest.fixture
def tree(tmp_path):
    """A varied project tree.

    Tree:
        AGENTS.md, README.md, secret.md, notes.txt, .hidden.md,
        .github/copilot-instructions.md,
        .github/prompts/review.prompt.md, .github/prompts/plan.prompt.md,
        .github/prompts/local.prompt.md,
        docs/guide.md, docs/sub/deep.md,
        dir.md/ (a directory whose name matches *.md)
    """
    root = tmp_path / "tree"
    root.mkdir()
    for rel, content in {
        "AGENTS.md": "agents",
        "README.md": "readme",
        "secret.md": "secret",
        "notes.txt": "notes",
        ".hidden.md": "hidden",
        ".github/copilot-instructions.md": "instructions",
        ".github/prompts/review.prompt.md": "review",
        ".github/prompts/plan.prompt.md": "plan",
        ".github/prompts/local.prompt.md": "local",
        "docs/guide.md": "guide",
        "docs/sub/deep.md": "deep",
    }.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content)
    (root / "dir.md").mkdir()
    return root


class TestIncludes:
    def test_literal(self, tree):
        result = resolve(tree, ["AGENTS.md"])
        assert list(result) == ["AGENTS.md"]

    def test_star(self, tree):
        result = resolve(tree, ["*.md"])
        assert sorted(result) == [".hidden.md", "AGENTS.md", "README.md", "secret.md"]

    def test_nested_literal_dirs(self, tree):
        result = resolve(tree, [".github/prompts/*.prompt.md"])
        assert sorted(result) == [
            ".github/prompts/local.prompt.md",
            ".github/prompts/plan.prompt.md",
            ".github/prompts/review.prompt.md",
        ]

    def test_wildcard_directory_segment(self, tree):
        result = resolve(tree, ["*/*.md"])
        assert sorted(result) == [".github/copilot-instructions.md", "docs/guide.md"]

    def test_not_recursive(self, tree):
        result = resolve(tree, ["docs/*"])
        assert "docs/sub/deep.md" not in result
        assert "docs/guide.md" in result

    def test_directories_skipped(self, tree):
        result = resolve(tree, ["*.md"])
        assert "dir.md" not in result

    def test_no_match_ignored(self, tree):
        assert resolve(tree, ["*.zzz", "missing/file.md"]) == {}

    def test_empty_includes(self, tree):
        assert resolve(tree, []) == {}

    def test_empty_pattern_ignored(self, tree):
        assert resolve(tree, [""]) == {}

    def test_deduplicated_first_seen_order(self, tree):
        result = resolve(tree, ["README.md", "*.md"])
        keys = list(result)
        assert keys.count("README.md") == 1
        assert keys[0] == "README.md"

    def test_missing_root(self, tmp_path):
        assert resolve(tmp_path / "nope", ["*.md"]) == {}

    def test_entry_fields(self, tree):
        entry = resolve(tree, ["AGENTS.md"])["AGENTS.md"]
        assert entry.path == "AGENTS.md"
        assert entry.full_path == tree / "AGENTS.md"
        assert entry.mode == stat.S_IMODE(os.stat(tree / "AGENTS.md").st_mode)

    def test_forward_slash_keys(self, tree):
        for rel in resolve(tree, [".github/*/*.md"]):
            assert "\\" not in rel
            assert not rel.startswith("/")

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlink_followed(self, tree):
        (tree / "link.md").symlink_to(tree / "AGENTS.md")
        assert "link.md" in resolve(tree, ["*.md"])

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_dangling_symlink_skipped(self, tree):
        (tree / "dangling.md").symlink_to(tree / "gone.md")
        assert "dangling.md" not in resolve(tree, ["*.md"])


class TestExcludes:
    def test_exclude_wins(self, tree):
        result = resolve(tree, ["*.md"], ["secret.md"])
        assert "secret.md" not in result
        assert "AGENTS.md" in result

    def test_exclude_glob(self, tree):
        result = resolve(tree, [".github/prompts/*.prompt.md"], [".github/prompts/l*"])
        assert ".github/prompts/local.prompt.md" not in result
        assert len(result) == 2

    def test_exclude_applies_to_every_include(self, tree):
        result = resolve(tree, ["secret.md", "*.md"], ["secret.md"])
        assert "secret.md" not in result

    def test_exclude_matches_full_relative_path(self, tree):
        # "*.md" has one segment, so it cannot exclude nested paths
        result = resolve(tree, ["docs/*.md"], ["*.md"])
        assert list(result) == ["docs/guide.md"]

    def test_none_excludes(self, tree):
        assert "secret.md" in resolve(tree, ["*.md"], None)


class TestErrors:
    def test_bad_include(self, tree):
        with pytest.raises(PatternError):
            resolve(tree, ["[abc"])

    def test_bad_exclude_without_matches(self, tree):
        # Validated up front even when nothing would be compared against it
        with pytest.raises(PatternError):
            resolve(tree, ["*.zzz"], ["[abc"])

    def test_bad_pattern_on_missing_root(self, tmp_path):
        with pytest.raises(PatternError):
            resolve(tmp_path / "nope", ["[abc"])

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlink_loop_literal(self, tree):
        (tree / "loop").symlink_to("loop")
        with pytest.raises(ResolutionIOError) as exc_info:
            resolve(tree, ["loop/x.md"])
        assert exc_info.value.operation == "stat"
        assert exc_info.value.path == str(tree / "loop" / "x.md")

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlink_loop_wildcard(self, tree):
        (tree / "loop").symlink_to("loop")
        with pytest.raises(ResolutionIOError) as exc_info:
            resolve(tree, ["l*/x.md"])
        assert exc_info.value.operation == "stat"

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_symlink_loop_listing(self, tree):
        (tree / "loop").symlink_to("loop")
        with pytest.raises(ResolutionIOError) as exc_info:
            resolve(tree, ["l*/*.md"])
        assert exc_info.value.operation == "list"

    def test_file_where_directory_expected(self, tree):
        # AGENTS.md is a file, so nothing can live below it
        assert resolve(tree, ["AGENTS.md/x.md"]) == {}
        assert resolve(tree, ["AGENTS.md/*.md"]) == {}

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0,
                        reason="permission bits not enforced")
    def test_unreadable_directory(self, tree):
        locked = tree / ".github" / "prompts"
        locked.chmod(0)
        try:
            with pytest.raises(ResolutionIOError) as exc_info:
                resolve(tree, [".github/prompts/*.md"])
            assert exc_info.value.operation == "list"
        finally:
            locked.chmod(0o755)
