import pytest

from drills.metrics import KernelReport, percentage_execution_time

SOURCE_METRICS = {
    1: [("startup", [2]), ("mem_trsfr", [10]), ("compute", [10, 20]),
        ("mem_trsfr", [10]), ("start time", [0]), ("end time", [300])],
    2: [("startup", [3]), ("mem_trsfr", [10, 30]), ("compute", [15, 20]),
        ("mem_trsfr", [11]), ("start time", [0]), ("end time", [300])],
    3: [("startup", [1]), ("mem_trsfr", [10]), ("compute", [12, 20]),
        ("mem_trsfr", [14, 11]), ("start time", [0]), ("end time", [300])],
    4: [("startup", [2, 3]), ("mem_trsfr", [10]), ("compute", [10, 22]),
        ("mem_trsfr", [10]), ("start time", [0]), ("end time", [300])],
}


def test_reports_in_kernel_order():
    reports = percentage_execution_time(SOURCE_METRICS)
    assert [report.kernel_id for report in reports] == [1, 2, 3, 4]
    assert all(report.total_time == 300 for report in reports)


def test_percentage_is_busy_over_total():
    for report in percentage_execution_time(SOURCE_METRICS):
        assert report.percentage == pytest.approx(
            100.0 * report.busy_time / report.total_time
        )
        assert 0 < report.percentage < 100


def test_first_kernel_busy_time():
    report = percentage_execution_time(SOURCE_METRICS)[0]
    assert report.busy_time == 52


def test_mapping_entries_accepted():
    reports = percentage_execution_time(
        {7: {"compute": [10, 20], "start time": [0], "end time": [300]}}
    )
    assert reports == [KernelReport(7, 30, 300, pytest.approx(10.0))]


def test_span_carries_over_to_next_kernel():
    reports = percentage_execution_time(
        {
            1: [("start time", [100]), ("end time", [300]), ("compute", [5])],
            2: [("compute", [5])],
        }
    )
    assert reports[1].total_time == reports[0].total_time
    assert reports[1].busy_time == reports[0].busy_time


def test_order_of_entries_does_not_matter():
    forward = percentage_execution_time(SOURCE_METRICS)
    backward = percentage_execution_time(
        {key: list(reversed(value)) for key, value in SOURCE_METRICS.items()}
    )
    assert forward == backward


def test_empty_span_raises():
    with pytest.raises(ValueError):
        percentage_execution_time({1: [("compute", [10])]})


def test_no_kernels():
    assert percentage_execution_time({}) == []