"""Region flow engine: pagination across a cyclic list of regions."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, NamedTuple, Protocol

from column_press.layout.regions import Region, RegionLayout

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """Content could not be placed into the configured regions."""

    pass


class OversizedElementError(LayoutError):
    """A single element does not fit into an empty region."""

    pass


class FillReport(NamedTuple):
    """Outcome of filling one region.

    Attributes:
        consumed: How many content items were placed
        has_more: Whether any content remains
    """

    consumed: int
    has_more: bool


class RegionFiller(Protocol):
    def fill(self, content: Any, region: Region) -> FillReport:
        """Place as much of content as fits into region."""
        ...


FooterDrawer = Callable[[str, float, float], None]
PageBreaker = Callable[[], None]


@dataclass
class FlowCursor:
    """Position of a running flow."""

    region_index: int = 0
    offset: int = 0


@dataclass(frozen=True)
class FlowResult:
    """Summary of a finished flow.

    Attributes:
        pages: Physical pages used
        fills: Regions filled
        last_region_index: Region that received the last content
        offset: Total items consumed
    """

    pages: int
    fills: int
    last_region_index: int
    offset: int


class RegionFlowEngine:
    """Flow content through page regions, stamping a footer per page.

    Page 1 uses the layout's first-page regions; every following page
    reuses the subsequent-page regions. When a page's regions are used
    up and content remains, the footer is drawn and a new page starts.
    The page on which content ends is not stamped here.
    """

    def __init__(
        self,
        layout: RegionLayout,
        filler: RegionFiller,
        draw_footer: FooterDrawer,
        new_page: PageBreaker,
        footer_text: str = "",
        footer_size: float = 6.0,
    ) -> None:
        self.layout = layout
        self.filler = filler
        self.draw_footer = draw_footer
        self.new_page = new_page
        self.footer_text = footer_text
        self.footer_size = footer_size

    @property
    def footer_position(self) -> tuple[float, float]:
        """Centre-x and baseline of the footer text.

        The baseline sits half a footer size below the strip's top edge.
        """
        rect = self.layout.footer.rect
        return rect.center_x, rect.top - self.footer_size / 2

    def stamp_footer(self) -> None:
        x, y = self.footer_position
        self.draw_footer(self.footer_text, x, y)

    def run(self, content: Any) -> FlowResult:
        """Fill regions until the filler reports no more content.

        Args:
            content: Opaque content handed to the filler on every call

        Returns:
            FlowResult describing the pages used

        Raises:
            LayoutError: If a fill reports remaining content but placed nothing
        """
        regions = self.layout.regions
        restart = self.layout.first_subsequent_page_region
        cursor = FlowCursor()
        pages = 1
        fills = 0

        while True:
            index = cursor.region_index
            report = self.filler.fill(content, regions[index])
            fills += 1
            cursor.offset += report.consumed

            if not report.has_more:
                break

            if report.consumed == 0:
                raise LayoutError(
                    f"Region {index} accepted no content at offset {cursor.offset}"
                )

            cursor.region_index += 1

            if cursor.region_index in (restart, self.layout.region_count):
                self.stamp_footer()
                self.new_page()
                pages += 1
                cursor.region_index = restart
                logger.debug("Page %d starts at offset %d", pages, cursor.offset)

        return FlowResult(
            pages=pages,
            fills=fills,
            last_region_index=cursor.region_index,
            offset=cursor.offset,
        )
