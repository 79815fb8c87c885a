"""Errors raised while checking a chart against its repository."""


class ChartCheckError(Exception):
    """Base class for per-application check failures."""


class FetchError(ChartCheckError):
    """The repository index could not be retrieved."""


class IndexDecodeError(ChartCheckError):
    """The repository index body is not a valid index document."""


class NoValidVersionsError(ChartCheckError):
    """No parseable version was published for the chart."""

    def __init__(self, chart: str):
        super().__init__(f"no valid versions found for chart {chart}")
        self.chart = chart
