"""
Human-readable rendering of solve results.

Which record fields are printed, and in what order, comes from the
[report.field_order] table of gridlogic.toml rather than from the solver.
"""

from .solver import SolveResult, SolveStatus


def order_fields(name: str, fields: list[str], field_orders: dict[str, list[str]]) -> list[str]:
    """
    Fields of a record to print, in print order.

    A configured order selects and orders fields; configured names the record
    does not have are skipped. Without configuration the schema order is used.
    """
    configured = field_orders.get(name)
    if configured is None:
        return fields
    return [f for f in configured if f in fields]


def format_report(result: SolveResult, field_orders: dict[str, list[str]] | None = None) -> str:
    """
    Render a result as text.

    Solved results list every record array (sorted by name) as
    `Name[i].field = label` lines, one blank line after each element, followed
    by scalar arrays as `Name[i] = label`.
    """
    field_orders = field_orders or {}

    if result.status == SolveStatus.NO_SOLUTION:
        return "NO SOLUTION FOUND.\n"
    if result.status == SolveStatus.ABORTED:
        return (
            f"SEARCH ABORTED after {result.iterations} of "
            f"{result.search_space} assignments.\n"
        )

    lines = ["SUCCESS:"]
    for name in sorted(result.records):
        for i, record in enumerate(result.records[name]):
            for field_name in order_fields(name, list(record), field_orders):
                lines.append(f"{name}[{i}].{field_name} = {record[field_name]}")
            lines.append("")

    for name in sorted(result.scalars):
        for i, label in enumerate(result.scalars[name]):
            lines.append(f"{name}[{i}] = {label}")

    return "\n".join(lines) + "\n"
