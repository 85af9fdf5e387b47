# src/periodkit/fiscal/__init__.py
"""
periodkit.fiscal
~~~~~~~~~~~~~~~~

Fiscal years: twelve-month periods anchored on a recurring month/day year
end instead of December 31.

Basic usage::

    from datetime import date
    from periodkit.fiscal import fiscal_year

    # US federal fiscal year 2020
    fiscal_year(date(2000, 9, 30), date(2020, 1, 1))
    # → Period(2019-10-01, 2020-09-30)
"""

from __future__ import annotations

from periodkit.fiscal.fiscal_year import fiscal_year, fiscal_years

__all__ = [
    "fiscal_year",
    "fiscal_years",
]
