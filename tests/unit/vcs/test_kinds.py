"""Tests for VcsKind parsing and RepositoryHandle."""

from __future__ import annotations

import pytest

from repoinit.vcs import NO_VCS, RepositoryHandle, VcsKind, parse_vcs_choice


class TestVcsKindParse:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("git", VcsKind.GIT),
            ("hg", VcsKind.MERCURIAL),
            ("Mercurial", VcsKind.MERCURIAL),
            ("pijul", VcsKind.PIJUL),
            ("FOSSIL", VcsKind.FOSSIL),
            ("svn", VcsKind.SUBVERSION),
            (" subversion ", VcsKind.SUBVERSION),
        ],
    )
    def test_known_names(self, name: str, expected: VcsKind) -> None:
        assert VcsKind.parse(name) is expected

    @pytest.mark.parametrize("name", ["cvs", "", "none", "bzr"])
    def test_unknown_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Unknown VCS kind"):
            VcsKind.parse(name)

    def test_str_is_value(self) -> None:
        assert str(VcsKind.MERCURIAL) == "mercurial"


class TestParseVcsChoice:
    def test_none_is_accepted(self) -> None:
        assert parse_vcs_choice("None") == NO_VCS

    def test_kind_is_delegated(self) -> None:
        assert parse_vcs_choice("hg") is VcsKind.MERCURIAL

    def test_unknown_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_vcs_choice("darcs")


class TestRepositoryHandle:
    def test_is_frozen(self) -> None:
        handle = RepositoryHandle(VcsKind.GIT)
        with pytest.raises(AttributeError):
            handle.kind = VcsKind.PIJUL  # type: ignore[misc]

    def test_equality_by_kind(self) -> None:
        assert RepositoryHandle(VcsKind.FOSSIL) == RepositoryHandle(VcsKind.FOSSIL)
        assert RepositoryHandle(VcsKind.FOSSIL) != RepositoryHandle(VcsKind.GIT)
