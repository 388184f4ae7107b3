"""Page regions and the pagination engine."""

from column_press.layout.regions import (
    HeaderLayout,
    PageAffinity,
    PageGeometry,
    Rect,
    Region,
    RegionConfigError,
    RegionLayout,
    header_layout,
    two_column_layout,
)
from column_press.layout.flow import (
    FillReport,
    FlowCursor,
    FlowResult,
    LayoutError,
    OversizedElementError,
    RegionFiller,
    RegionFlowEngine,
)

__all__ = [
    "HeaderLayout",
    "PageAffinity",
    "PageGeometry",
    "Rect",
    "Region",
    "RegionConfigError",
    "RegionLayout",
    "header_layout",
    "two_column_layout",
    "FillReport",
    "FlowCursor",
    "FlowResult",
    "LayoutError",
    "OversizedElementError",
    "RegionFiller",
    "RegionFlowEngine",
]
