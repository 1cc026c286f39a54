import threading

from batch_parser import DEFAULT_DELAY, DebouncedParser


def test_default_delay_is_half_a_second():
    assert DEFAULT_DELAY == 0.5


def test_only_last_submission_is_parsed():
    results = []
    done = threading.Event()

    def on_result(report):
        results.append(report)
        done.set()

    parser = DebouncedParser(on_result, ["김철수"], delay=0.3,
                             reference_year=2025, reference_month=7)
    parser.submit("김철수\n0715")
    parser.submit("김철수\n0715\n0716")

    assert done.wait(timeout=5)
    parser.cancel()
    assert len(results) == 1
    assert results[0].entry_count == 2


def test_flush_runs_pending_parse_synchronously():
    results = []
    parser = DebouncedParser(results.append, [], delay=60,
                             reference_year=2025, reference_month=7)
    parser.submit("박영희\n0720")
    assert parser.pending

    report = parser.flush()

    assert not parser.pending
    assert results == [report]
    assert report.batches[0].employee_name == "박영희"


def test_cancel_drops_pending_run():
    results = []
    parser = DebouncedParser(results.append, [], delay=60)
    parser.submit("김철수\n0715")
    parser.cancel()

    assert parser.flush() is None
    assert results == []


def test_blank_text_clears_preview_without_parsing():
    results = []
    parser = DebouncedParser(results.append, [], delay=60)
    parser.submit("   ")
    report = parser.flush()
    assert report.batches == [] and report.errors == [] and report.warnings == []
