"""Share of a kernel's wall time spent in its recorded sub-functions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

START_TIME = "start time"
END_TIME = "end time"


@dataclass(frozen=True)
class KernelReport:
    """Timing summary of one kernel."""

    kernel_id: int
    busy_time: int
    total_time: int
    percentage: float


def percentage_execution_time(
    metrics: Mapping[
        int,
        Mapping[str, Sequence[int]] | Iterable[tuple[str, Sequence[int]]],
    ],
) -> list[KernelReport]:
    """Summarise each kernel, in ascending order of kernel id.

    Each kernel maps sub-function names to lists of durations; names may
    repeat when given as ``(name, durations)`` pairs. The entries
    ``"start time"`` and ``"end time"`` give the kernel's wall-clock span;
    a kernel without them keeps the span last seen. Raises ValueError when
    the span is zero.
    """
    reports: list[KernelReport] = []
    start = end = 0
    for kernel_id in sorted(metrics):
        entries = metrics[kernel_id]
        if isinstance(entries, Mapping):
            entries = entries.items()
        busy = 0
        for name, durations in entries:
            if name == START_TIME:
                start = durations[0]
            elif name == END_TIME:
                end = durations[0]
            else:
                busy += sum(durations)
        total = end - start
        if total == 0:
            raise ValueError(f"kernel {kernel_id} has an empty time span")
        reports.append(KernelReport(kernel_id, busy, total, 100.0 * busy / total))
    return reports