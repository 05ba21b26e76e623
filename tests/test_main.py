import io

import pytest

from point_table.main import main, read_points

POINTS = "0.5 0.5\n0.2 0.8\n0.9 0.1\n"


@pytest.mark.parametrize("impl", ["kdtree", "brute"])
def test_report(impl, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(POINTS))
    assert main(["0.5", "0.6", "2", "--impl", impl]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "st.empty()? False"
    assert lines[1] == "st.size() = 3"
    assert lines[2] == "st.contains((0.5, 0.6))? False"
    assert lines[3] == "st.range([-1.0, 1.0] x [-1.0, 1.0]):"
    assert sorted(lines[4:7]) == ["  (0.2, 0.8)", "  (0.5, 0.5)", "  (0.9, 0.1)"]
    assert lines[7] == "st.nearest((0.5, 0.6)) = (0.5, 0.5)"
    assert lines[8] == "st.nearest((0.5, 0.6), 2):"
    assert lines[9:] == ["  (0.5, 0.5)", "  (0.2, 0.8)"]


def test_report_from_file(tmp_path, capsys):
    path = tmp_path / "points.txt"
    path.write_text("0.1 0.1 0.3\n0.3\n")
    assert main(["0.1", "0.1", "1", "--rect", "0", "0", "0.2", "0.2", "-i", str(path)]) == 0
    out = capsys.readouterr().out
    assert "st.size() = 2" in out
    assert "st.contains((0.1, 0.1))? True" in out
    assert "st.nearest((0.1, 0.1)) = (0.3, 0.3)" in out


def test_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["0.5", "0.5", "3"]) == 0
    out = capsys.readouterr().out
    assert "st.empty()? True" in out
    assert "st.nearest((0.5, 0.5)) = None" in out


def test_invalid_input_is_reported(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0.5 abc"))
    assert main(["0.5", "0.5", "3"]) == 1
    assert "Invalid coordinate" in capsys.readouterr().err


@pytest.mark.parametrize("impl", ["kdtree", "brute"])
def test_point_outside_domain_is_reported(impl, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1.5 0.5"))
    assert main(["0.5", "0.5", "3", "--impl", impl]) == 1
    assert "outside of domain" in capsys.readouterr().err


def test_missing_file_is_reported(tmp_path, capsys):
    assert main(["0.5", "0.5", "3", "-i", str(tmp_path / "missing.txt")]) == 1


def test_read_points_rejects_odd_count():
    with pytest.raises(ValueError):
        read_points(io.StringIO("0.1 0.2 0.3"))
    assert read_points(io.StringIO("0.1 0.2\n0.3 0.4")).shape == (2, 2)
