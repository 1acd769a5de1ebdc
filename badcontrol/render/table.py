from __future__ import annotations

from ..reshape import DisplayTable

_BOLD = "font-weight: bold"


def to_text(table: DisplayTable, title: str | None = None) -> str:
    """
    Fixed-width rendering: labels left-aligned, cells right-aligned, a rule
    under the header and above the emphasised row.
    """
    label_width = max([len(label) for label in table.labels] + [1])
    widths = [
        max([len(name)] + [len(cells[j]) for _, cells in table.rows])
        for j, name in enumerate(table.columns)
    ]
    rule = "─" * (label_width + sum(w + 2 for w in widths))

    lines = [""]
    if title:
        lines.append(title)
    header = " " * label_width + "".join(f"  {name:>{w}}" for name, w in zip(table.columns, widths))
    lines += [header, rule]
    for i, (label, cells) in enumerate(table.rows):
        if i == table.emphasis:
            lines.append(rule)
        lines.append(f"{label:<{label_width}}" + "".join(f"  {c:>{w}}" for c, w in zip(cells, widths)))
    lines.append("")
    return "\n".join(lines)


def to_html(table: DisplayTable, caption: str | None = None) -> str:
    """HTML table with the emphasised row in bold and no index column."""
    frame = table.to_frame()

    def _emphasise(row):
        style = _BOLD if row.name == table.emphasis else ""
        return [style] * len(row)

    styler = frame.style.hide(axis="index").apply(_emphasise, axis=1)
    if caption:
        styler = styler.set_caption(caption)
    return styler.to_html()
