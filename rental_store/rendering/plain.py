"""Plain-text statement layout"""

from rental_store.domain.statement import StatementView
from rental_store.rendering.base import MoneyFormat, StatementRenderer

SEPARATOR = "=" * 45


class PlainRenderer(StatementRenderer):
    """
    Newline-delimited statement:

        Rental Store Statement as of 2024-03-15
        =============================================
        Customer: Bob, Total: $11.00, Points: 4
            Mad Max; Price: $2.00 Owed: $5.00 Rented On: 2024-03-11
    """

    name = "plain"
    media_type = "text/plain"

    def render(self, view: StatementView, money: MoneyFormat) -> str:
        lines = [
            f"Rental Store Statement as of {view.as_of.isoformat()}",
            SEPARATOR,
            f"Customer: {view.customer_name}, "
            f"Total: {money.format(view.total_amount)}, "
            f"Points: {view.total_points}",
        ]
        for line in view.lines:
            lines.append(
                f"\t{line.title}; "
                f"Price: {money.format(line.unit_price)} "
                f"Owed: {money.format(line.owed_amount)} "
                f"Rented On: {line.rented_at.isoformat()}"
            )
        return "\n".join(lines) + "\n"
