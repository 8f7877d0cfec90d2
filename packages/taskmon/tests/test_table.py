from __future__ import annotations

import io

import pytest
from taskmon.cli._table import TabWriter, print_table, row_template


def test_row_template_has_one_field_per_column() -> None:
    assert row_template(3) == "{}\t{}\t{}\t\n"
    assert row_template(0) == "\n"


def test_print_table_header_separator_and_row() -> None:
    out = io.StringIO()

    def print_rows(w: TabWriter, tmpl: str) -> None:
        w.write(tmpl.format("x", "yy"))

    print_table(["A", "BB"], print_rows, out=out)

    lines = out.getvalue().splitlines()
    assert len(lines) == 3
    assert [line.split() for line in lines] == [
        ["A", "BB"],
        ["-", "--"],
        ["x", "yy"],
    ]
    assert out.getvalue() == "A  BB  \n-  --  \nx  yy  \n"


def test_print_table_without_rows_prints_header_only() -> None:
    out = io.StringIO()
    print_table(["Host", "PID"], lambda w, tmpl: None, out=out)
    assert out.getvalue().splitlines() == ["Host  PID  ", "----  ---  "]


def test_print_table_pads_to_widest_cell_in_column() -> None:
    out = io.StringIO()
    rows = [("a", "1"), ("a-much-longer-host", "12345")]

    def print_rows(w: TabWriter, tmpl: str) -> None:
        for host, pid in rows:
            w.write(tmpl.format(host, pid))

    print_table(["Host", "PID"], print_rows, out=out)

    lines = out.getvalue().splitlines()
    # Second column starts at the same offset on every line
    offset = len("a-much-longer-host") + 2
    assert [line[:offset].rstrip() for line in lines] == [
        "Host",
        "----",
        "a",
        "a-much-longer-host",
    ]
    assert [line[offset:].rstrip() for line in lines] == ["PID", "---", "1", "12345"]


def test_tab_writer_measures_wide_characters_in_cells() -> None:
    out = io.StringIO()
    w = TabWriter(out)
    w.write("日本\tx\t\n")
    w.write("ab\ty\t\n")
    w.flush()
    assert out.getvalue() == "日本  x  \nab    y  \n"


def test_tab_writer_leaves_unterminated_text_unpadded() -> None:
    out = io.StringIO()
    w = TabWriter(out, padding=1)
    w.write("key\tvalue\n")
    w.write("k\tv\n")
    w.flush()
    assert out.getvalue() == "key value\nk   v\n"


def test_tab_writer_flush_empties_buffer() -> None:
    out = io.StringIO()
    w = TabWriter(out)
    w.write("a\t\n")
    w.flush()
    w.flush()
    assert out.getvalue() == "a  \n"


def test_tab_writer_rejects_multi_character_padchar() -> None:
    with pytest.raises(ValueError, match="single character"):
        TabWriter(io.StringIO(), padchar="  ")
