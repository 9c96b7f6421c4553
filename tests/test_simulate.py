import pytest

from wordle_entropy.simulate import SimulationReport, plot_results, simulate, summarize


def _rows(text):
    return dict(line.split(None, 1) for line in text.splitlines())


def test_simulate_and_summarize(small_words):
    lines = []
    traces = simulate(small_words.words, small_words, max_attempts=6, log=lines.append)
    assert [t.target_word for t in traces] == list(small_words.words)
    assert all(t.solved for t in traces)
    assert len(lines) == len(small_words)

    rows = _rows(summarize(traces))
    assert rows["games"] == "10"
    assert rows["solved"] == "10 (100.00%)"
    assert rows["opening"] == "slate in 10 of 10 games"
    assert "unsolved" not in rows


def test_report_histogram(small_words):
    traces = simulate(small_words.words, small_words)
    report = SimulationReport.from_traces(traces)
    hist = report.histogram()
    assert sum(hist.values()) == report.solved == 10
    assert hist == {n: sorted(report.solved_attempts).count(n) for n in set(report.solved_attempts)}
    # slate is in the list, so exactly one game ends on the opening
    assert hist[1] == 1

    padded = report.histogram(max_attempts=6)
    assert list(padded) == [1, 2, 3, 4, 5, 6]
    assert sum(padded.values()) == 10


def test_summary_lists_failures(small_words):
    traces = simulate(["house", "qqqqq"], small_words, max_attempts=1)
    report = SimulationReport.from_traces(traces)
    assert report.failed_targets == ("house", "qqqqq")
    assert report.to_dict()["failed"] == 2

    rows = _rows(summarize(traces))
    assert rows["failed"] == "2 (100.00%)"
    assert rows["unsolved"] == "house, qqqqq"
    assert "attempts" not in rows


def test_summary_empty():
    assert summarize([]) == "No results."
    assert SimulationReport.from_traces([]).rate(0) == 0.0


def test_plot(tmp_path, small_words):
    pytest.importorskip("matplotlib")
    out = tmp_path / "results.png"
    traces = simulate(["house", "crane"], small_words)
    plot_results(traces=traces, max_attempts=6, out_path=str(out))
    assert out.stat().st_size > 0
