"""Tests for grouping and flow comparison."""

from types import SimpleNamespace

from jobreport.domain.grouping import GroupBy, compare_flows, group_jobs


def _job(job_id, job_url, job_exec_url):
    return SimpleNamespace(job_id=job_id, job_url=job_url, job_exec_url=job_exec_url)


JOBS = [
    _job("1", "def/a", "exec/1"),
    _job("2", "def/b", "exec/2"),
    _job("3", "def/a", "exec/3"),
    _job("4", "def/a", "exec/1"),
]


def test_group_by_execution_url():
    grouped = group_jobs(JOBS, GroupBy.JOB_EXECUTION_URL)
    assert list(grouped) == ["exec/1", "exec/2", "exec/3"]
    assert [job.job_id for job in grouped["exec/1"]] == ["1", "4"]


def test_group_by_definition_url_uses_a_distinct_key():
    grouped = group_jobs(JOBS, GroupBy.JOB_DEFINITION_URL)
    assert list(grouped) == ["def/a", "def/b"]
    assert [job.job_id for job in grouped["def/a"]] == ["1", "3", "4"]


def test_grouping_is_a_partition():
    for group_by in GroupBy:
        grouped = group_jobs(JOBS, group_by)
        flattened = [job for jobs in grouped.values() for job in jobs]
        assert sorted(job.job_id for job in flattened) == ["1", "2", "3", "4"]


def test_group_empty_input():
    assert group_jobs([], GroupBy.JOB_EXECUTION_URL) == {}


def test_compare_orders_common_keys_first():
    flow1 = [_job("x1", "def/only1", "e"), _job("x2", "def/common", "e")]
    flow2 = [_job("y1", "def/only2", "e"), _job("y2", "def/common", "e")]

    comparison = compare_flows(flow1, flow2)

    assert list(comparison) == ["def/common", "def/only1", "def/only2"]
    assert [job.job_id for job in comparison["def/common"].first] == ["x2"]
    assert [job.job_id for job in comparison["def/common"].second] == ["y2"]
    assert comparison["def/only1"].second == []
    assert comparison["def/only2"].first == []
    assert comparison["def/common"].in_both
    assert not comparison["def/only1"].in_both


def test_compare_identical_flows_pairs_equal_lists():
    comparison = compare_flows(JOBS, JOBS)
    assert list(comparison) == ["def/a", "def/b"]
    for pair in comparison.values():
        assert pair.first == pair.second
        assert pair.first
