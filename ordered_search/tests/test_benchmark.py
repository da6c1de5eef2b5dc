import json

import pytest

from ordered_search.performance import BenchmarkConfig, BenchmarkStatus, DataGenerator, SearchBenchmark
from ordered_search.performance.__main__ import main
from ordered_search.search_manager import SearchManager


@pytest.fixture
def manager():
    with SearchManager() as mgr:
        yield mgr


def test_data_generator_sorted_outputs():
    generator = DataGenerator(seed=3)
    assert generator.sorted_integers(5) == [0, 2, 4, 6, 8]
    duplicates = generator.sorted_with_duplicates(200, unique_ratio=0.05)
    assert len(duplicates) == 200
    assert duplicates == sorted(duplicates)
    assert len(set(duplicates)) <= 10


def test_random_targets_hit_ratio():
    generator = DataGenerator(seed=11)
    data = generator.sorted_integers(100)
    targets = generator.random_targets(data, 40, hit_ratio=0.25)
    assert len(targets) == 40
    present = set(data)
    assert sum(t in present for t in targets) == 10


def test_random_targets_are_reproducible():
    data = list(range(0, 50, 5))
    first = DataGenerator(seed=1).random_targets(data, 20)
    second = DataGenerator(seed=1).random_targets(data, 20)
    assert first == second


@pytest.mark.parametrize("name", ["binary_search", "insertion_point", "comparator_search"])
def test_run_completes(manager, name):
    config = BenchmarkConfig(search_name=name, test_sizes=[0, 10, 100], iterations=2,
                             queries=50, hit_ratio=0.4, seed=5)
    result = SearchBenchmark(manager).run(config)
    assert result.status is BenchmarkStatus.COMPLETED
    assert len(result.metrics) == 6
    assert all(m.hits == 20 for m in result.metrics if m.input_size > 0)
    summary = result.summary_statistics()
    assert set(summary) == {"size_0", "size_10", "size_100"}
    assert summary["size_100"]["sample_count"] == 2


def test_run_unknown_search_fails(manager):
    result = SearchBenchmark(manager).run(BenchmarkConfig(search_name="nope", test_sizes=[10]))
    assert result.status is BenchmarkStatus.FAILED
    assert "nope" in result.error_message
    assert result.end_time is not None


def test_results_written_as_json(manager, tmp_path):
    benchmark = SearchBenchmark(manager, results_dir=tmp_path / "results")
    results = benchmark.compare(["binary_search", "comparator_search"], [16], iterations=1, queries=10, seed=0)
    assert set(results) == {"binary_search", "comparator_search"}
    files = sorted((tmp_path / "results").glob("*.json"))
    assert len(files) == 2
    payload = json.loads(files[0].read_text(encoding="utf-8"))
    assert payload["status"] == "completed"
    assert "size_16" in payload["summary"]


def test_cli_prints_summary(capsys, tmp_path, restore_package_logging):
    exit_code = main(["--search", "binary_search", "--search", "insertion_point",
                      "--sizes", "8", "32", "--iterations", "1", "--queries", "5", "--seed", "2",
                      "--results-dir", str(tmp_path)])
    assert exit_code == 0
    captured = capsys.readouterr()
    summary = json.loads(captured.out)
    assert "benchmark finished" in captured.err
    assert set(summary) == {"binary_search", "insertion_point"}
    assert set(summary["binary_search"]) == {"size_8", "size_32"}


def test_cli_reports_failure(capsys, restore_package_logging):
    assert main(["--search", "missing", "--sizes", "4", "--iterations", "1", "--queries", "1"]) == 1


def test_run_with_duplicate_heavy_data(manager):
    config = BenchmarkConfig(search_name="insertion_point", test_sizes=[200], iterations=1,
                             queries=40, hit_ratio=0.5, seed=9, unique_ratio=0.05)
    result = SearchBenchmark(manager).run(config)
    assert result.status is BenchmarkStatus.COMPLETED
    assert result.metrics[0].hits == 20


def test_duplicate_heavy_data_is_used(manager, monkeypatch):
    calls = []
    original = DataGenerator.sorted_with_duplicates

    def recording(self, size, unique_ratio=0.1):
        calls.append((size, unique_ratio))
        return original(self, size, unique_ratio)

    monkeypatch.setattr(DataGenerator, "sorted_with_duplicates", recording)
    SearchBenchmark(manager).compare(["binary_search"], [50], iterations=1, queries=5,
                                     seed=1, unique_ratio=0.2)
    assert calls == [(50, 0.2)]


def test_cli_unique_ratio(capsys, restore_package_logging):
    assert main(["--sizes", "64", "--iterations", "1", "--queries", "4",
                 "--seed", "3", "--unique-ratio", "0.1"]) == 0
    summary = json.loads(capsys.readouterr().out)
    assert set(summary["binary_search"]) == {"size_64"}
