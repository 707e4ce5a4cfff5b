"""HTML statement layout"""

from html import escape

from rental_store.domain.statement import StatementLine, StatementView
from rental_store.rendering.base import MoneyFormat, StatementRenderer

COLUMNS = ("Title", "Price", "Owed", "Rented On")


class HtmlRenderer(StatementRenderer):
    """Standalone HTML5 document with a summary paragraph and one table row per rental"""

    name = "html"
    media_type = "text/html"

    def render(self, view: StatementView, money: MoneyFormat) -> str:
        as_of = view.as_of.isoformat()
        header = "".join(f"<th>{escape(col)}</th>" for col in COLUMNS)
        rows = [self._row(line, money) for line in view.lines]

        parts = [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '<meta charset="utf-8">',
            f"<title>Rental Store Statement - {escape(view.customer_name)}</title>",
            "</head>",
            "<body>",
            f"<h1>Rental Store Statement as of {as_of}</h1>",
            f'<p class="summary">Customer: {escape(view.customer_name)}, '
            f"Total: {escape(money.format(view.total_amount))}, "
            f"Points: {view.total_points}</p>",
            '<table class="rentals">',
            f"<thead><tr>{header}</tr></thead>",
            "<tbody>",
            *rows,
            "</tbody>",
            "</table>",
            "</body>",
            "</html>",
        ]
        return "\n".join(parts) + "\n"

    @staticmethod
    def _row(line: StatementLine, money: MoneyFormat) -> str:
        cells = (
            line.title,
            money.format(line.unit_price),
            money.format(line.owed_amount),
            line.rented_at.isoformat(),
        )
        return "<tr>" + "".join(f"<td>{escape(cell)}</td>" for cell in cells) + "</tr>"
