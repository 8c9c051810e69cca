import io

from contest_kit.__main__ import main
from contest_kit.runner import get_problem, run_problem


def test_run_problem_writes_answer():
    output = io.StringIO()
    assert run_problem("abc177_d", io.StringIO("5 3\n1 2\n3 4\n5 1\n"), output) == 0
    assert output.getvalue() == "3\n"


def test_run_problem_accepts_dashed_ids():
    assert get_problem("ABC278-B").id == "abc278_b"


def test_run_problem_reports_bad_input(capsys):
    output = io.StringIO()
    assert run_problem("abc195_b", io.StringIO("100 x 2\n"), output) == 1
    assert "ERROR: Bad input for 'abc195_b'" in capsys.readouterr().err


def test_run_problem_reports_unknown_problem(capsys):
    assert run_problem("abc000_a", io.StringIO(""), io.StringIO()) == 2
    assert "ERROR: Unknown problem 'abc000_a'" in capsys.readouterr().err


def test_cli_list(capsys):
    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "abc185_f\tRange Xor Query" in out
    assert "practice_b\tInteractive Sorting (interactive)" in out


def test_cli_run_from_file(tmp_path, capsys):
    input_path = tmp_path / "case.in"
    input_path.write_text("3 3\n...\n...\n...\n")
    assert main(["run", "abc151_d", "--input", str(input_path)]) == 0
    assert capsys.readouterr().out == "4\n"


def test_cli_run_missing_file(tmp_path, capsys):
    assert main(["run", "abc151_d", "--input", str(tmp_path / "missing.in")]) == 1
    assert "ERROR: Input file not found" in capsys.readouterr().err


def test_cli_check_exit_codes(tmp_path, capsys):
    cases = tmp_path / "abc085_c"
    cases.mkdir()
    (cases / "sample1.in").write_text("20 196000\n")
    (cases / "sample1.out").write_text("-1 -1 -1\n")
    args = ["check", "abc085_c", "--cases-dir", str(tmp_path), "--disable-tqdm", "--quiet"]
    assert main(args) == 0

    (cases / "sample2.in").write_text("1000 1234000\n")
    (cases / "sample2.out").write_text("14 27 959\n")
    assert main(args) == 1

    assert main(["check", "practice_b", "--cases-dir", str(tmp_path), "--quiet"]) == 2
    assert "interactive" in capsys.readouterr().out


def test_run_problem_reports_invalid_values(capsys):
    cases = {
        "abc278_b": "24 0\n",
        "abc151_d": "2 3\n...\n.\n",
        "abc185_f": "1 1\n5\n3 1 1\n",
    }
    for problem_id, text in cases.items():
        assert run_problem(problem_id, io.StringIO(text), io.StringIO()) == 1
        assert f"ERROR: Bad input for '{problem_id}'" in capsys.readouterr().err


def test_cli_run_rejects_undecodable_input(tmp_path, capsys):
    input_path = tmp_path / "bad.in"
    input_path.write_bytes(b"\xff\xfe 1\n")
    assert main(["run", "abc278_b", "--input", str(input_path)]) == 1
    assert "input is not valid text" in capsys.readouterr().err


def test_cli_list_ignores_malformed_time_limit(monkeypatch, capsys):
    monkeypatch.setenv("CONTEST_KIT_TIME_LIMIT", "soon")
    assert main(["list"]) == 0
    assert "abc185_f" in capsys.readouterr().out


def test_cli_check_reports_malformed_time_limit(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("CONTEST_KIT_TIME_LIMIT", "soon")
    assert main(["check", "abc085_c", "--cases-dir", str(tmp_path), "--quiet"]) == 2
    assert "CONTEST_KIT_TIME_LIMIT must be a number" in capsys.readouterr().err


def test_cli_check_uses_cases_dir_from_environment(tmp_path, monkeypatch):
    cases = tmp_path / "abc278_a"
    cases.mkdir()
    (cases / "sample1.in").write_text("3 2\n2 7 8\n")
    (cases / "sample1.out").write_text("8 0 0\n")
    monkeypatch.setenv("CONTEST_KIT_CASES_DIR", str(tmp_path))
    assert main(["check", "abc278_a", "--disable-tqdm", "--quiet"]) == 0


def test_cli_check_fails_without_cases(tmp_path):
    (tmp_path / "abc278_a").mkdir()
    assert main(["check", "abc278_a", "--cases-dir", str(tmp_path), "--quiet"]) == 1
