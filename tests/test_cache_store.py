"""Tests for the on-disk cache format."""

import io

from drun.cache_store import parse_cache, read_cache, serialize_cache, write_cache


class TestSerialize:
    """Tests for serialize_cache."""

    def test_one_line_per_entry(self) -> None:
        """Each entry becomes '<name>\\0<target>\\n'."""
        text = serialize_cache({"vim": "vim"})
        assert text == "vim\0vim\n"

    def test_empty_cache_serializes_to_nothing(self) -> None:
        """An empty mapping writes no lines at all."""
        assert serialize_cache({}) == ""

    def test_round_trip(self) -> None:
        """Parsing serialized output gives back the same pairs."""
        cache = {
            "vim": "vim",
            "Firefox Web Browser": "firefox.desktop",
            "": "broken.desktop",
            "Files (Nautilus)": "org.gnome.Nautilus.desktop",
        }
        assert parse_cache(serialize_cache(cache)) == cache


class TestParse:
    """Tests for parse_cache."""

    def test_malformed_lines_are_dropped(self) -> None:
        """Lines with zero or several separators are skipped one by one."""
        text = "vim\0vim\nno-separator-here\na\0b\0c\n"
        assert parse_cache(text) == {"vim": "vim"}

    def test_blank_lines_are_ignored(self) -> None:
        """Empty lines between records do not produce entries."""
        assert parse_cache("\n\nls\0ls\n\n") == {"ls": "ls"}

    def test_missing_trailing_newline(self) -> None:
        """The final record is kept even without a line terminator."""
        assert parse_cache("ls\0ls\ncat\0cat") == {"ls": "ls", "cat": "cat"}

    def test_later_lines_win(self) -> None:
        """A duplicated name keeps the target from the last line."""
        text = "Editor\0gedit.desktop\nEditor\0kate.desktop\n"
        assert parse_cache(text) == {"Editor": "kate.desktop"}

    def test_crlf_line_endings(self) -> None:
        """A trailing carriage return is not part of the target."""
        assert parse_cache("ls\0ls\r\n") == {"ls": "ls"}


class TestFileHelpers:
    """Tests for write_cache/read_cache on open files."""

    def test_write_appends(self) -> None:
        """Two writes to the same handle accumulate."""
        fh = io.StringIO()
        write_cache(fh, {"ls": "ls"})
        write_cache(fh, {"Firefox": "firefox.desktop"})
        assert fh.getvalue() == "ls\0ls\nFirefox\0firefox.desktop\n"

    def test_read_starts_from_beginning(self) -> None:
        """read_cache rewinds before reading."""
        fh = io.StringIO("ls\0ls\n")
        fh.seek(0, io.SEEK_END)
        assert read_cache(fh) == {"ls": "ls"}
