from batch_parser import parse, split_tokens
from data_model import DiagnosticKind, LeaveType

SAMPLE = """김철수
0715
0716(오전)

박영희
0720
"""


def test_sample_without_known_employees():
    report = parse(SAMPLE, [], reference_year=2025, reference_month=7)

    assert [b.employee_name for b in report.batches] == ["김철수", "박영희"]
    kim, park = report.batches
    assert [(v.date, v.type) for v in kim.vacations] == [
        ("2025-07-15", LeaveType.ANNUAL),
        ("2025-07-16", LeaveType.MORNING_HALF),
    ]
    assert [v.date for v in park.vacations] == ["2025-07-20"]

    assert report.errors == []
    assert len(report.warnings) == 2
    assert all(w.kind is DiagnosticKind.WARNING for w in report.warnings)
    assert [w.line_number for w in report.warnings] == [1, 5]
    assert report.is_valid
    assert report.entry_count == 3


def test_known_employees_produce_no_warnings():
    report = parse(SAMPLE, ["김철수", "박영희"], 2025, 7)
    assert report.warnings == []
    assert len(report.batches) == 2


def test_date_before_any_name_is_an_error():
    report = parse("0715", ["김철수"], 2025, 7)
    assert report.batches == []
    assert len(report.errors) == 1
    assert report.errors[0].kind is DiagnosticKind.ERROR
    assert report.errors[0].line_number == 1
    assert "0715" in report.errors[0].message
    assert report.warnings == []
    assert not report.is_valid


def test_one_error_per_orphan_date_token_and_line_is_discarded():
    report = parse("0715, 0716, uwaga\n김철수\n0720", ["김철수"], 2025, 7)
    assert len(report.errors) == 2
    assert [b.employee_name for b in report.batches] == ["김철수"]
    assert [v.date for v in report.batches[0].vacations] == ["2025-07-20"]


def test_noise_tokens_on_date_line_are_skipped():
    report = parse("김철수\n0715, 휴가, 0716；0717", ["김철수"], 2025, 7)
    assert report.errors == []
    assert [v.date for v in report.batches[0].vacations] == [
        "2025-07-15", "2025-07-16", "2025-07-17",
    ]


def test_name_line_keeps_full_text_even_with_separators():
    report = parse("김철수, 팀장\n0715", [], 2025, 7)
    assert report.batches[0].employee_name == "김철수, 팀장"


def test_employee_without_dates_is_dropped_silently():
    report = parse("김철수\n박영희\n0715", ["김철수", "박영희"], 2025, 7)
    assert [b.employee_name for b in report.batches] == ["박영희"]
    assert report.errors == []


def test_unknown_employee_without_dates_still_warns():
    report = parse("이민호", [], 2025, 7)
    assert report.batches == []
    assert len(report.warnings) == 1


def test_no_deduplication():
    report = parse("김철수\n0715\n0715\n김철수\n0715", ["김철수"], 2025, 7)
    assert [len(b.vacations) for b in report.batches] == [2, 1]


def test_crlf_and_blank_lines():
    report = parse("\r\n김철수\r\n\r\n   \r\n0715\r\n", ["김철수"], 2025, 7)
    assert report.batches[0].vacations[0].date == "2025-07-15"


def test_empty_input():
    report = parse("   \n\n", [], 2025, 7)
    assert report.batches == []
    assert report.errors == []
    assert report.warnings == []


def test_parsed_as_preview():
    report = parse("김철수\n0716(오후)", ["김철수"], 2025, 7)
    assert report.batches[0].vacations[0].parsed_as == "2025/07/16 (오후)"


def test_split_tokens():
    assert split_tokens("0715,,0716 ; 0717，0718") == ["0715", "0716", "0717", "0718"]
