"""Human-readable rendering of durations and summary statistics."""

from prettytable import PrettyTable, TableStyle

WIDTH = 60
THICK_SEP = "=" * WIDTH
THIN_SEP = "-" * WIDTH

SECOND = 1_000_000
MILLISECOND = 1_000

STATISTIC_FIELDS = ("min", "max", "median", "average", "total")


def _make_table(headers, rows, align_map):
    """Create a PrettyTable with SINGLE_BORDER style and per-column alignment."""
    t = PrettyTable()
    t.set_style(TableStyle.SINGLE_BORDER)
    t.field_names = headers
    for row in rows:
        t.add_row(row)
    for h in headers:
        t.align[h] = align_map.get(h, "r")
    return str(t)


def format_duration(value):
    """Format a duration for display, choosing the unit by magnitude.

    Parameters
    ----------
    value : Duration or float
        A :class:`~microbench.core.duration.Duration` or a number of
        microseconds.

    Returns
    -------
    str
        ``"<n> seconds"`` from one second up, ``"<n> milliseconds"`` from one
        millisecond up, ``"<n> microseconds"`` below that.
    """
    mcs = float(value)
    if mcs >= SECOND:
        return f"{mcs / SECOND} seconds"
    if mcs >= MILLISECOND:
        return f"{mcs / MILLISECOND} milliseconds"
    if mcs.is_integer():
        return f"{int(mcs)} microseconds"
    return f"{mcs} microseconds"


def format_title(title, subtitle=None):
    """Return title block lines with thick separators."""
    lines = [THICK_SEP, f" {title}"]
    if subtitle is not None:
        lines.append(f" {subtitle}")
    lines.append(THICK_SEP)
    return lines


def format_kv_line(key, value):
    """Format a key-value pair as an indented line."""
    return f" {key}: {value}"


def format_footer():
    """Return the closing separator."""
    return [THICK_SEP]


def format_statistics_table(stats):
    """Build the per-statistic table for a summary."""
    headers = ["Statistic", "Time", "Microseconds"]
    rows = []
    for name in STATISTIC_FIELDS:
        value = getattr(stats, name)
        rows.append([name.capitalize(), format_duration(value), f"{float(value):.3f}"])

    table = _make_table(headers, rows, {"Statistic": "l", "Time": "l"})
    return ["", *table.split("\n")]


def format_summary(stats, title=None):
    """Render summary statistics as a titled text report.

    Parameters
    ----------
    stats : SummaryStatistics
        Output of :func:`~microbench.core.aggregate.run_n_times` or
        :func:`~microbench.core.aggregate.run_for`.
    title : str, optional
        Heading shown above the table. Defaults to ``"Benchmark Summary"``.

    Returns
    -------
    str
        The report, one line per row.
    """
    mode = "Fixed count" if stats.requested_duration is None else "Duration bounded"
    lines = format_title(title or "Benchmark Summary", subtitle=f"Mode: {mode}")
    lines.extend(format_statistics_table(stats))
    lines.extend(["", THIN_SEP])
    lines.append(format_kv_line("Runs", stats.count))
    if stats.requested_number is not None:
        lines.append(format_kv_line("Requested runs", stats.requested_number))
    if stats.requested_duration is not None:
        lines.append(format_kv_line("Requested duration", format_duration(stats.requested_duration)))
    lines.extend(format_footer())
    return "\n".join(lines)
