"""Estimate summary report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from fedtax.engines.brackets import ASSUMPTIONS, DISCLAIMER
from fedtax.models.reports import EstimateResult, ProjectedEstimate

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_currency(amount: Decimal) -> str:
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.0f}"


def format_percentage(rate: Decimal) -> str:
    return f"{rate * 100:.0f}%"


class EstimateSummaryGenerator:
    """Generates a plain-text explanation of how an estimate was computed."""

    def __init__(self) -> None:
        self.env = Environment(loader=FileSystemLoader(str(TEMPLATE_DIR)), trim_blocks=True, lstrip_blocks=True)
        self.env.filters["currency"] = format_currency
        self.env.filters["percent"] = format_percentage

    def render(self, estimate: EstimateResult, projection: ProjectedEstimate | None = None) -> str:
        """Render the estimate summary, with the year-end projection when given."""
        template = self.env.get_template("estimate_summary.txt")
        return template.render(
            est=estimate,
            projection=projection,
            assumptions=ASSUMPTIONS,
            disclaimer=DISCLAIMER,
        )
