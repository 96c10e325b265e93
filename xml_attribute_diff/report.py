import sys

from .config import ReportSettings

DEFAULT_REFERENCE_LABEL = "file1"
DEFAULT_CANDIDATE_LABEL = "file2"


def _count_line(delta, reference_label, candidate_label):
    if delta == 0:
        return f"{candidate_label} has the same amount of attributes as {reference_label}"

    direction = "more" if delta > 0 else "less"
    magnitude = abs(delta)
    if magnitude == 1:
        return f"{candidate_label} has one attribute {direction} than {reference_label}"
    return f"{candidate_label} has {magnitude} attributes {direction} than {reference_label}"


def _section(values, kind, label, settings):
    """Renders the header for new or missing values followed by one indented line per value."""
    if not values:
        return [f"{label} has no {kind} attributes"]

    if len(values) == 1:
        lines = [f"{label} has one {kind} attribute:"]
    else:
        lines = [f"{label} has {len(values)} {kind} attributes:"]

    ordered = sorted(values) if settings.sort_values else list(values)
    lines.extend(f"{settings.indent}{value}" for value in ordered)
    return lines


def render_report(report, reference_label=DEFAULT_REFERENCE_LABEL, candidate_label=DEFAULT_CANDIDATE_LABEL,
                  settings=None):
    """
    Renders a DiffReport as human-readable text.

    Args:
        report (DiffReport): The comparison result.
        reference_label (str): Name shown for the reference document.
        candidate_label (str): Name shown for the candidate document.
        settings (ReportSettings): Rendering options. Defaults are used when None.

    Returns:
        str: The report, one line per statement, ending with a newline.
    """
    settings = settings or ReportSettings()
    if not settings.include_labels:
        reference_label, candidate_label = DEFAULT_REFERENCE_LABEL, DEFAULT_CANDIDATE_LABEL

    lines = [_count_line(report.delta, reference_label, candidate_label)]
    lines.extend(_section(report.new_values, "new", candidate_label, settings))
    lines.extend(_section(report.missing_values, "missing", candidate_label, settings))
    return "\n".join(lines) + "\n"


def print_report(report, reference_label=DEFAULT_REFERENCE_LABEL, candidate_label=DEFAULT_CANDIDATE_LABEL,
                 settings=None, stream=None):
    """Writes the rendered report to ``stream`` (stdout when None)."""
    output_stream = stream if stream is not None else sys.stdout
    output_stream.write(render_report(report, reference_label, candidate_label, settings))
