"""Shared fixtures for dotgh tests."""

import pytest
from click.testing import CliRunner


def _write_tree(root, files):
    """Create *files* ({relative_path: str | bytes}) under *root*."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            p.write_bytes(content)
        else:
            p.write_text(content)
    return root


@pytest.fixture
def src(tmp_path):
    d = tmp_path / "src"
    d.mkdir()
    return d


@pytest.fixture
def dst(tmp_path):
    d = tmp_path / "dst"
    d.mkdir()
    return d


# ---------------------------------------------------------------------------
# CLI fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_dir(tmp_path):
    """A config directory whose config.yaml manages *.md and .github/prompts."""
    d = tmp_path / "config"
    d.mkdir()
    (d / "config.yaml").write_text(
        "includes:\n"
        "  - \"*.md\"\n"
        "  - \".github/prompts/*.prompt.md\"\n"
        "excludes:\n"
        "  - \"secret.md\"\n"
    )
    return d


@pytest.fixture
def templates_dir(config_dir):
    """The default templates directory for *config_dir*, with one template."""
    d = config_dir / "templates"
    _write_tree(d / "basic", {
        "AGENTS.md": "agents\n",
        ".github/prompts/review.prompt.md": "review\n",
    })
    return d


@pytest.fixture
def workdir(tmp_path):
    d = tmp_path / "work"
    d.mkdir()
    return d
