import io

from dirsnap.compare import Difference, compare_versions, diff_versions, split_versions


def test_split_versions_stops_at_marks():
    lines = ["a\n", "b\n", "stop\n", "c\n", "stop\n", "ignored\n"]
    assert split_versions(lines) == (["a\n", "b\n"], ["c\n"])


def test_split_versions_without_second_version():
    assert split_versions(["a\n", "stop\n"]) == (["a\n"], [])


def test_split_versions_mark_inside_line():
    first, second = split_versions(["x\n", "Fisier: stopwatch\n", "y\n"])
    assert first == ["x\n"]
    assert second == ["y\n"]


def test_identical_versions_have_no_difference():
    version = ["Fisier: a\n", "Director: b\n"]
    assert diff_versions(version, list(version)) == []


def test_changed_line_is_reported():
    first = ["Fisier: a\n", "Fisier: b\n"]
    second = ["Fisier: a\n", "Fisier: c\n"]
    assert diff_versions(first, second) == [Difference(1, "Fisier: b\n", "Fisier: c\n")]


def test_longer_first_version_reports_extra_line():
    first = ["a\n", "b\n", "c\n"]
    second = ["a\n"]
    assert diff_versions(first, second) == [Difference(1, "b\n", "")]


def test_longer_second_version_reports_added_lines():
    first = ["a\n"]
    second = ["a\n", "b\n"]
    assert diff_versions(first, second) == [Difference(1, "", "b\n")]


def test_compare_versions_prints_report():
    stream = io.StringIO("a\nb\nstop\na\nc\nstop\n")
    out = io.StringIO()
    result = compare_versions(stream, out)
    assert result == [Difference(1, "b\n", "c\n")]
    assert out.getvalue() == "Fisierul s a modificat\nb\n <->\nc\n\n"


def test_compare_versions_silent_when_equal():
    stream = io.StringIO("a\nstop\na\nstop\n")
    out = io.StringIO()
    assert compare_versions(stream, out) == []
    assert out.getvalue() == ""