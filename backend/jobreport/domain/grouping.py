"""Grouping of flat job result lists into URL-keyed maps."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from jobreport.db.models import JobResult


class GroupBy(str, Enum):
    """Field used as the grouping key."""

    JOB_EXECUTION_URL = "job_exec_url"
    JOB_DEFINITION_URL = "job_url"

    def key_of(self, result: "JobResult") -> Optional[str]:
        return getattr(result, self.value)


def group_jobs(
    results: Iterable["JobResult"], group_by: GroupBy
) -> dict[Optional[str], list["JobResult"]]:
    """Partition ``results`` by the selected URL.

    Keys keep first-seen order and each group keeps the input order of its
    records.
    """
    grouped: dict[Optional[str], list["JobResult"]] = {}
    for result in results:
        grouped.setdefault(group_by.key_of(result), []).append(result)
    return grouped


@dataclass
class FlowPair:
    """Jobs of one job definition in each of two compared flow executions."""

    first: list["JobResult"] = field(default_factory=list)
    second: list["JobResult"] = field(default_factory=list)

    @property
    def in_both(self) -> bool:
        return bool(self.first) and bool(self.second)


def compare_flows(
    results1: Sequence["JobResult"], results2: Sequence["JobResult"]
) -> dict[Optional[str], FlowPair]:
    """Align two flow executions by job definition URL.

    Job definitions present in both flows come first, then those only in
    the first flow, then those only in the second.
    """
    map1 = group_jobs(results1, GroupBy.JOB_DEFINITION_URL)
    map2 = group_jobs(results2, GroupBy.JOB_DEFINITION_URL)

    common = [key for key in map1 if key in map2]
    only_first = [key for key in map1 if key not in map2]
    only_second = [key for key in map2 if key not in map1]

    return {
        key: FlowPair(first=list(map1.get(key, [])), second=list(map2.get(key, [])))
        for key in common + only_first + only_second
    }
