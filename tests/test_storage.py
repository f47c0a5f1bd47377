"""Tests for the line file storage."""

from __future__ import annotations

import pytest

from quest.engine.storage import LineFileStore, split_lines


class TestLineFileStore:
    def test_write_then_read(self, line_store):
        line_store.write_all_lines("goals.txt", ["10", "EternalGoal|Pray|Daily|1"])
        assert line_store.read_all_lines("goals.txt") == ["10", "EternalGoal|Pray|Daily|1"]

    def test_newline_terminated(self, line_store):
        line_store.write_all_lines("goals.txt", ["0"])
        assert line_store.path_for("goals.txt").read_text(encoding="utf-8") == "0\n"

    def test_creates_base_dir(self, tmp_path):
        store = LineFileStore(tmp_path / "a" / "b")
        store.write_all_lines("x.txt", ["1"])
        assert (tmp_path / "a" / "b" / "x.txt").exists()

    def test_overwrite_leaves_no_temp_files(self, line_store):
        line_store.write_all_lines("goals.txt", ["1"])
        line_store.write_all_lines("goals.txt", ["2"])
        assert line_store.read_all_lines("goals.txt") == ["2"]
        assert [p.name for p in line_store.base_dir.iterdir()] == ["goals.txt"]

    def test_reads_crlf(self, line_store):
        line_store.base_dir.mkdir(parents=True)
        line_store.path_for("win.txt").write_bytes(b"5\r\nEternalGoal|Pray|Daily|1\r\n")
        assert line_store.read_all_lines("win.txt") == ["5", "EternalGoal|Pray|Daily|1"]

    def test_missing_file_raises_oserror(self, line_store):
        with pytest.raises(FileNotFoundError):
            line_store.read_all_lines("missing.txt")

    def test_unicode(self, line_store):
        line_store.write_all_lines("u.txt", ["EternalGoal|Méditer|Chaque jour ∞|3"])
        assert line_store.read_all_lines("u.txt") == ["EternalGoal|Méditer|Chaque jour ∞|3"]

    @pytest.mark.parametrize("sep", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
    def test_only_newline_splits(self, line_store, sep):
        lines = ["5", f"EternalGoal|Pray{sep}daily|Morning|5"]
        line_store.write_all_lines("goals.txt", lines)
        assert line_store.read_all_lines("goals.txt") == lines


class TestSplitLines:
    def test_final_newline_ignored(self):
        assert split_lines("1\n2\n") == ["1", "2"]

    def test_no_final_newline(self):
        assert split_lines("1\n2") == ["1", "2"]

    def test_empty(self):
        assert split_lines("") == []

    def test_strips_one_carriage_return(self):
        assert split_lines("1\r\n2\r\r\n") == ["1", "2\r"]

    def test_inner_blank_line_kept(self):
        assert split_lines("1\n\n2\n") == ["1", "", "2"]

    def test_unicode_separators_are_text(self):
        assert split_lines("a\u2028b\x85c\n") == ["a\u2028b\x85c"]
