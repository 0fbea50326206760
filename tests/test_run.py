"""
Tests for run.py against the bundled corpus.
"""

import json
from pathlib import Path

import pytest
import yaml

import run

CORPUS = yaml.safe_load(run.DEFAULT_CONFIG.read_text(encoding="utf-8"))


@pytest.mark.parametrize("entry", CORPUS["patterns"], ids=lambda e: e["name"])
def test_corpus_entry(entry: dict) -> None:
    """Test that every corpus entry translates and matches as expected."""
    results = run.check_pattern(entry)
    assert results["errors"] == []
    assert results["passed"], results["cases"]


def test_check_pattern_reports_translation_mismatch() -> None:
    """Test that a wrong expected translation is reported."""
    results = run.check_pattern({"name": "bad", "pattern": "ab{", "translation": "ab{"})
    assert not results["passed"]
    assert "expected" in results["errors"][0]


def test_check_pattern_reports_case_mismatch() -> None:
    """Test that a wrong expected match fails the entry."""
    entry = {"name": "bad", "pattern": "a", "cases": [{"input": "b", "match": ["a"]}]}
    results = run.check_pattern(entry)
    assert not results["passed"]
    assert results["cases"][0]["actual"] is None


def test_main_test_passes() -> None:
    """Test the test command over the whole corpus."""
    with pytest.raises(SystemExit) as excinfo:
        run.main(["test"])
    assert excinfo.value.code == 0


def test_main_test_unknown_name(capsys) -> None:
    """Test that an unknown pattern name fails."""
    with pytest.raises(SystemExit) as excinfo:
        run.main(["test", "-n", "no_such_pattern"])
    assert excinfo.value.code == 1
    assert "no_such_pattern" in capsys.readouterr().out


def test_main_list(capsys) -> None:
    """Test listing the corpus."""
    with pytest.raises(SystemExit) as excinfo:
        run.main(["test", "--list"])
    assert excinfo.value.code == 0
    out = capsys.readouterr().out
    assert "empty_class" in out
    assert "html" in out


def test_main_bench(tmp_path: Path) -> None:
    """Test a short benchmark run writing JSON results."""
    with pytest.raises(SystemExit) as excinfo:
        run.main(["bench", "-n", "sizzle_attribute_class", "-i", "2", "-o", str(tmp_path)])
    assert excinfo.value.code == 0

    saved = json.loads((tmp_path / "sizzle_attribute_class_benchmark.json").read_text(encoding="utf-8"))
    assert saved["iterations"] == 2
    assert saved["summary"]["matches"] > 0


def test_main_test_output_file_holds_every_pattern(tmp_path: Path) -> None:
    """Test that a file output keeps the results of every pattern."""
    output = tmp_path / "all.json"
    with pytest.raises(SystemExit) as excinfo:
        run.main(["test", "-o", str(output)])
    assert excinfo.value.code == 0

    saved = json.loads(output.read_text(encoding="utf-8"))
    assert sorted(saved) == sorted(entry["name"] for entry in CORPUS["patterns"])
    assert saved["empty_class"]["translation"] == "(?!)[a][b]"


def test_main_test_output_directory(tmp_path: Path) -> None:
    """Test that a directory output gets one file per pattern."""
    with pytest.raises(SystemExit):
        run.main(["test", "-o", str(tmp_path)])
    for entry in CORPUS["patterns"]:
        assert (tmp_path / f"{entry['name']}_test.json").exists()


def test_main_bench_output_file(tmp_path: Path) -> None:
    """Test that a benchmark file output is keyed by pattern name."""
    output = tmp_path / "bench.json"
    with pytest.raises(SystemExit):
        run.main(["bench", "-i", "1", "-o", str(output)])
    saved = json.loads(output.read_text(encoding="utf-8"))
    assert "sizzle_attribute_class" in saved
    assert saved["sizzle_attribute_class"]["iterations"] == 1


def test_missing_config(tmp_path: Path) -> None:
    """Test that a missing corpus file exits with an error."""
    with pytest.raises(SystemExit) as excinfo:
        run.main(["test", "-c", str(tmp_path / "missing.yaml")])
    assert excinfo.value.code == 1


def test_empty_corpus(tmp_path: Path, capsys) -> None:
    """Test a corpus without patterns."""
    config = tmp_path / "empty.yaml"
    config.write_text("inputs: {}\npatterns: []\n", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        run.main(["test", "-c", str(config)])
    assert excinfo.value.code == 1
    assert "No patterns" in capsys.readouterr().out


def test_no_command() -> None:
    """Test that running without a command prints help and exits."""
    with pytest.raises(SystemExit) as excinfo:
        run.main([])
    assert excinfo.value.code == 1
