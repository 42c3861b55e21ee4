"""Plain-text renderings of validation reports and suggestion sets."""

from tfadvisor.validators.models import ValidationReport

PREVIEW_LIMIT = 500


def format_validation_report(report: ValidationReport) -> str:
    summary = report.summary
    lines = [
        f"Validation summary: {summary.file_count} files analyzed, "
        f"{summary.error_count} errors, {summary.warning_count} warnings, "
        f"{summary.info_count} info",
        "",
    ]

    if not report.findings:
        lines.append("No issues found!")
        return "\n".join(lines)

    for i, finding in enumerate(report.findings, start=1):
        lines.append(f"{i}. [{finding.severity.value}] {finding.message}")
        if finding.file:
            lines.append(f"   File: {finding.file}")
        if finding.best_practice:
            lines.append(f"   Best Practice: {finding.best_practice}")
        if finding.suggestion:
            lines.append(f"   Suggestion: {finding.suggestion}")
        lines.append("")

    return "\n".join(lines)


def format_improvement_suggestions(file_contents: dict[str, str]) -> str:
    """Render suggested files for display, truncating long content."""
    parts = [f"Suggested improvements for {len(file_contents)} files:", ""]
    for name, content in file_contents.items():
        preview = content
        if len(content) > PREVIEW_LIMIT:
            preview = content[:PREVIEW_LIMIT] + "...\n(content truncated for display)"
        parts.extend([f"File: {name}", "```", preview, "```", ""])
    return "\n".join(parts)
