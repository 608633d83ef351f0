from __future__ import annotations

import json

from commit_report.adapters.exporters.json_report import report_filename, write_report
from commit_report.domain.models import CommitRecord
from commit_report.domain.report import merge_day_buckets, report_to_json, sort_day_buckets
from commit_report.domain.time_utils import parse_day_key


def record(date: str, repo: str = "acme/a", message: str = "m") -> CommitRecord:
    return CommitRecord(repo=repo, message=message, author="Alice", date=date)


def as_set(items):
    return {tuple(sorted(item.items())) for item in items}


def test_sort_is_chronological_not_lexicographic() -> None:
    buckets = {
        "10/01/2024": [record("2024-01-10T00:00:00Z")],
        "02/01/2024": [record("2024-01-02T00:00:00Z")],
        "01/02/2024": [record("2024-02-01T00:00:00Z")],
        "31/12/2023": [record("2023-12-31T00:00:00Z")],
    }

    keys = list(sort_day_buckets(buckets))

    assert keys == ["31/12/2023", "02/01/2024", "10/01/2024", "01/02/2024"]
    assert all(parse_day_key(a) <= parse_day_key(b) for a, b in zip(keys, keys[1:]))


def test_sort_returns_new_mapping() -> None:
    buckets = {"02/01/2024": [record("2024-01-02T00:00:00Z")]}
    ordered = sort_day_buckets(buckets)
    ordered["02/01/2024"].append(record("2024-01-02T01:00:00Z"))
    assert len(buckets["02/01/2024"]) == 1


def test_merge_appends_under_existing_keys() -> None:
    target = {"05/03/2024": [record("2024-03-05T10:00:00Z", "acme/a")]}
    source = {
        "05/03/2024": [record("2024-03-05T12:00:00Z", "acme/b")],
        "06/03/2024": [record("2024-03-06T12:00:00Z", "acme/b")],
    }

    merged = merge_day_buckets(target, source)

    assert merged is target
    assert [r.repo for r in merged["05/03/2024"]] == ["acme/a", "acme/b"]
    assert len(merged["06/03/2024"]) == 1


def test_report_filename_pads_month() -> None:
    assert report_filename(2024, 3) == "commits_2024_03.json"
    assert report_filename(2024, 11) == "commits_2024_11.json"


def test_written_report_round_trips(tmp_path) -> None:
    report = sort_day_buckets(
        {
            "10/03/2024": [record("2024-03-10T08:00:00Z", "acme/b", "fix: ação")],
            "05/03/2024": [record("2024-03-05T10:00:00Z", "acme/a", "one"), record("2024-03-05T12:00:00Z", "acme/c", "two")],
        }
    )

    path = write_report(report, str(tmp_path / "out"), 2024, 3)

    assert path.endswith("commits_2024_03.json")
    with open(path, encoding="utf-8") as f:
        raw = f.read()
    assert "ação" in raw
    assert '\n  "05/03/2024"' in raw
    loaded = json.loads(raw)
    expected = report_to_json(report)
    assert list(loaded) == list(expected)
    for key in expected:
        assert as_set(loaded[key]) == as_set(expected[key])
    assert set(loaded["05/03/2024"][0]) == {"repo", "message", "author", "date"}
