"""Sample customer for demos: python -m rental_store.seed [--format html]"""

import argparse
import sys
from datetime import date, timedelta
from typing import Optional

from rental_store.config import settings
from rental_store.domain.models import Customer, Movie
from rental_store.infrastructure.observability.logging import setup_logging
from rental_store.domain.pricing import CHILDREN, NEW_RELEASE, REGULAR
from rental_store.utils.date_utils import fixed_clock


def build_sample_customer(today: Optional[date] = None) -> Customer:
    """
    Bob's rentals, evaluated on ``today``:

    - Mad Max (regular, 4 days): 2 days over, 2.00 + 2 x 1.50 = 5.00
    - Dune (new release, 10 days): flat 3.00, bonus point
    - Babe (children, 4 days): 1 day over, 1.50 + 1.50 = 3.00
    """
    today = today or date.today()
    customer = Customer("Bob", clock=fixed_clock(today))
    customer.add_rental(Movie("Mad Max", REGULAR), today - timedelta(days=4))
    customer.add_rental(Movie("Dune", NEW_RELEASE), today - timedelta(days=10))
    customer.add_rental(Movie("Babe", CHILDREN), today - timedelta(days=4))
    return customer


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Print the sample rental statement")
    parser.add_argument("--format", default=None, help="Statement format (plain, html)")
    parser.add_argument("--as-of", type=date.fromisoformat, default=None, help="Reference date (YYYY-MM-DD)")
    args = parser.parse_args(argv)

    # Statement goes to stdout, diagnostics to stderr
    setup_logging(settings.log_level, stream=sys.stderr)

    customer = build_sample_customer(args.as_of)
    sys.stdout.write(customer.statement(args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
