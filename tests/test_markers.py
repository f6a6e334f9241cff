from __future__ import annotations

from find_up.markers import STANDARD_MARKERS, standard_markers


def test_vcs_markers_come_first() -> None:
    assert STANDARD_MARKERS[:2] == (".git", ".jj")


def test_table_has_expected_ecosystems() -> None:
    for marker in ("package.json", "Cargo.toml", "go.mod", "pyproject.toml", "pom.xml", "flake.nix"):
        assert marker in STANDARD_MARKERS


def test_table_order_within_ecosystem() -> None:
    assert STANDARD_MARKERS.index("bun.lockb") < STANDARD_MARKERS.index("bun.lock")
    assert STANDARD_MARKERS.index("go.mod") < STANDARD_MARKERS.index("go.work")
    assert STANDARD_MARKERS[-1] == "default.nix"
    assert len(STANDARD_MARKERS) == 40


def test_standard_markers_returns_copy() -> None:
    markers = standard_markers()
    markers.append("extra")
    assert "extra" not in STANDARD_MARKERS
    assert standard_markers() == list(STANDARD_MARKERS)
