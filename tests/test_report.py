import logging
import threading

from splitfile.report import OperationReport, get_logger
from splitfile.structs import OperationStatus


def test_get_logger_adds_single_handler():
    logger = get_logger("splitfile.test_report")
    again = get_logger("splitfile.test_report")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_report_lifecycle():
    report = OperationReport(operation="merge")
    assert report.status == OperationStatus.PENDING
    assert report.duration == 0.0
    assert not report.is_finished

    report._mark_running(parts_total=2)
    report.record_part(10)
    report.record_part(5)
    report._mark_completed()

    assert report.status == OperationStatus.COMPLETED
    assert report.parts_total == 2
    assert report.parts_done == 2
    assert report.bytes_copied == 15
    assert report.wait(timeout=0)
    assert "status=completed" in repr(report)
    assert "parts=2/2" in repr(report)


def test_report_failure():
    report = OperationReport()
    error = RuntimeError("disk full")

    report._mark_running()
    report._mark_failed(error)

    assert report.status == OperationStatus.FAILED
    assert report.exception is error
    assert report.has_error
    assert report.is_finished


def test_report_wait_times_out():
    assert OperationReport().wait(timeout=0.01) is False


def test_record_part_is_thread_safe():
    report = OperationReport(parts_total=800)

    def worker():
        for _ in range(100):
            report.record_part(3)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert report.parts_done == 800
    assert report.bytes_copied == 2_400
