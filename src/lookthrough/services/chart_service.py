"""Bar chart rendering of a `PortfolioReport` with plotly."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional
import logging

import plotly.graph_objects as go
from plotly.subplots import make_subplots

from lookthrough.data_models.exposure_result import ExposureResult, PortfolioReport

logger = logging.getLogger(__name__)

Y_AXIS_TITLE = "% Net assets"
BAR_COLOR = "#636efa"
UNKNOWN_COLOR = "gray"
IMAGE_FORMATS = ("png", "jpeg", "webp", "svg", "pdf", "eps")


def _hover_amounts(result_items, report: PortfolioReport) -> Optional[List[str]]:
    if report.total_amount is None:
        return None
    return [f"{item.amount(report.total_amount):.0f} {report.currency}" for item in result_items]


def _add_breakdown(fig: go.Figure, result: ExposureResult, report: PortfolioReport, row: int, limit: int) -> None:
    items = result.top(limit)
    labels = [i.label for i in items]
    values = [i.percentage for i in items]
    hover = _hover_amounts(items, report)

    trace = go.Bar(
        x=labels,
        y=values,
        name="",
        text=[f"{v:.2f}%" for v in values],
        marker_color=[UNKNOWN_COLOR if i.is_unknown else BAR_COLOR for i in items],
        hoverinfo="text" if hover else "none",
        hovertext=hover,
        showlegend=False,
    )
    fig.add_trace(trace, row=row, col=1)
    fig.update_xaxes(title_text=result.dimension.value, row=row, col=1)
    fig.update_yaxes(title_text=Y_AXIS_TITLE, row=row, col=1)


def build_exposure_figure(report: PortfolioReport, limit: int = 25) -> go.Figure:
    """One bar chart per dimension, stacked vertically, each truncated to `limit` bars."""
    rows = max(len(report.exposures), 1)
    fig = make_subplots(rows=rows, cols=1)
    for idx, result in enumerate(report.exposures, start=1):
        _add_breakdown(fig, result, report, row=idx, limit=limit)

    name = report.name or "portfolio"
    fig.update_layout(
        title_text=f"Asset exposure for {name} portfolio, TER {report.ter_pct:.3f}%",
        height=1024,
        showlegend=False,
    )
    return fig


def write_exposure_charts(
    report: PortfolioReport,
    output_folder: Path | str,
    file_stem: str,
    limit: int = 25,
    image_format: Optional[str] = None,
    image_scale: float = 1.0,
    image_size: tuple = (1920, 1080),
    display: bool = False,
) -> List[Path]:
    """Write `<output_folder>/<file_stem>.html` and optionally a static image.

    Static images need the `kaleido` package. Returns the written paths.
    """
    if image_format is not None and image_format not in IMAGE_FORMATS:
        raise ValueError(f"Unsupported image format {image_format!r}; expected one of {IMAGE_FORMATS}")

    out = Path(output_folder)
    out.mkdir(parents=True, exist_ok=True)
    fig = build_exposure_figure(report, limit=limit)

    written: List[Path] = []
    html_path = out / f"{file_stem}.html"
    fig.write_html(str(html_path))
    written.append(html_path)
    logger.info("Wrote exposure charts to %s", html_path)

    if image_format is not None:
        width, height = image_size
        image_path = out / f"{file_stem}.{image_format}"
        fig.write_image(str(image_path), format=image_format, width=width, height=height, scale=image_scale)
        written.append(image_path)
        logger.info("Wrote exposure image to %s", image_path)

    if display:
        fig.show()

    return written
