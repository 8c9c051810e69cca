import json

import pytest

from contest_kit.checker import CheckConfig, SampleChecker, check_cases, compare_output, discover_cases


def _write_case(directory, name, text, expected):
    directory.mkdir(parents=True, exist_ok=True)
    (directory / f"{name}.in").write_text(text)
    (directory / f"{name}.out").write_text(expected)


def _config(tmp_path, **overrides):
    options = {"cases_dir": tmp_path, "time_limit_seconds": 60.0, "use_tqdm": False, "verbose": False}
    options.update(overrides)
    return CheckConfig(**options)


def test_compare_output_ignores_whitespace_layout():
    assert compare_output("1 2\n3\n", "1 2 3")
    assert not compare_output("1 2 3", "1 2")


def test_discover_cases_requires_expected_output(tmp_path):
    _write_case(tmp_path, "b", "1\n", "1\n")
    _write_case(tmp_path, "a", "2\n", "2\n")
    (tmp_path / "orphan.in").write_text("3\n")
    names = [name for name, _, _ in discover_cases(tmp_path)]
    assert names == ["a", "b"]


def test_discover_cases_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        discover_cases(tmp_path / "missing")


def test_check_reports_each_verdict(tmp_path):
    cases = tmp_path / "abc185_f"
    _write_case(cases, "sample1", "3 4\n1 2 3\n2 1 3\n2 2 3\n1 2 3\n2 2 3\n", "0\n1\n2\n")
    _write_case(cases, "wrong", "1 1\n5\n2 1 1\n", "4\n")
    _write_case(cases, "truncated", "3 1\n1 2\n", "0\n")

    result = SampleChecker(_config(tmp_path)).check("abc185_f")

    verdicts = dict(zip(result.dataframe["case"], result.dataframe["verdict"]))
    assert verdicts == {"sample1": "AC", "truncated": "RE", "wrong": "WA"}
    assert result.stats.total_cases == 3
    assert result.stats.verdict_counts == {"AC": 1, "RE": 1, "WA": 1}
    assert not result.stats.all_accepted


def test_check_marks_slow_cases(tmp_path):
    _write_case(tmp_path / "abc195_b", "sample1", "100 200 2\n", "10 20\n")
    result = SampleChecker(_config(tmp_path, time_limit_seconds=1e-12)).check("abc195_b")
    assert list(result.dataframe["verdict"]) == ["TLE"]


def test_check_writes_reports(tmp_path):
    _write_case(tmp_path / "abc278_a", "sample1", "3 2\n2 7 8\n", "8 0 0\n")
    checker = SampleChecker(_config(tmp_path))

    csv_path = tmp_path / "report.csv"
    result = checker.check("abc278_a", csv_path)
    assert result.stats.all_accepted
    assert csv_path.read_text().splitlines()[0] == "case,verdict,elapsed_seconds,expected,actual"

    json_path = tmp_path / "report.json"
    checker.check("abc278_a", json_path)
    records = json.loads(json_path.read_text())
    assert records[0]["case"] == "sample1"
    assert records[0]["verdict"] == "AC"

    with pytest.raises(ValueError):
        checker.check("abc278_a", tmp_path / "report.txt")


def test_check_rejects_interactive_problem(tmp_path):
    with pytest.raises(ValueError):
        SampleChecker(_config(tmp_path)).check("practice_b")


def test_check_cases_reports_errors(tmp_path, capsys):
    assert check_cases("abc999_z", _config(tmp_path)) is None
    assert check_cases("abc177_d", _config(tmp_path)) is None
    out = capsys.readouterr().out
    assert "ERROR: Unknown problem 'abc999_z'" in out
    assert "ERROR: Case directory" in out


def test_config_reads_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("CONTEST_KIT_CASES_DIR", str(tmp_path))
    monkeypatch.setenv("CONTEST_KIT_TIME_LIMIT", "3.5")
    config = CheckConfig()
    assert config.cases_dir == tmp_path
    assert config.time_limit_seconds == 3.5


def test_config_rejects_non_positive_time_limit():
    with pytest.raises(ValueError):
        CheckConfig(time_limit_seconds=0)


def test_check_without_cases_is_not_accepted(tmp_path, capsys):
    (tmp_path / "abc278_a").mkdir()
    result = SampleChecker(_config(tmp_path, verbose=True)).check("abc278_a")
    assert result.stats.total_cases == 0
    assert not result.stats.all_accepted
    assert "WARNING: no cases found" in capsys.readouterr().out


def test_config_rejects_malformed_environment_time_limit(monkeypatch):
    monkeypatch.setenv("CONTEST_KIT_TIME_LIMIT", "soon")
    with pytest.raises(ValueError, match="CONTEST_KIT_TIME_LIMIT"):
        CheckConfig()
