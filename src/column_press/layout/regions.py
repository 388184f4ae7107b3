"""Page regions for column flow.

Coordinates are PDF points with the origin at the bottom-left corner
of the page, as reportlab uses them.
"""

from dataclasses import dataclass
from enum import Enum

from reportlab.lib.pagesizes import letter


class RegionConfigError(ValueError):
    """The region layout cannot drive a flow."""

    pass


class PageAffinity(Enum):
    """Which page a region belongs to, relative to the current page."""

    FIRST = "first"
    SUBSEQUENT = "subsequent"
    FOOTER = "footer"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle.

    Attributes:
        left: Minimum x
        bottom: Minimum y
        right: Maximum x
        top: Maximum y
    """

    left: float
    bottom: float
    right: float
    top: float

    @classmethod
    def from_corners(cls, x1: float, y1: float, x2: float, y2: float) -> "Rect":
        """Build a rectangle from two corners given in any order."""
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2


@dataclass(frozen=True)
class Region:
    rect: Rect
    page: PageAffinity


@dataclass(frozen=True)
class RegionLayout:
    """Fixed cyclic list of content regions plus a footer region.

    Content flows through the first-page regions once, then cycles
    through the subsequent-page regions for every following page.
    """

    first_page: tuple[Region, ...]
    subsequent_pages: tuple[Region, ...]
    footer: Region

    def __post_init__(self) -> None:
        if not self.first_page:
            raise RegionConfigError("Layout needs at least one first-page region")
        if not self.subsequent_pages:
            raise RegionConfigError(
                "Layout needs at least one subsequent-page region"
            )
        for region in self.regions:
            if region.rect.width <= 0 or region.rect.height <= 0:
                raise RegionConfigError(f"Degenerate region: {region.rect}")

    @property
    def regions(self) -> tuple[Region, ...]:
        """Content regions in flow order."""
        return self.first_page + self.subsequent_pages

    @property
    def first_subsequent_page_region(self) -> int:
        """Index of the first region used on pages after the first."""
        return len(self.first_page)

    @property
    def regions_per_page_group(self) -> int:
        return len(self.subsequent_pages)

    @property
    def region_count(self) -> int:
        return len(self.first_page) + len(self.subsequent_pages)


@dataclass(frozen=True)
class HeaderLayout:
    """Page-1 header rectangles: title block and info block."""

    title: Rect
    info: Rect


@dataclass(frozen=True)
class PageGeometry:
    """Page size and margins the layout is derived from."""

    width: float = letter[0]
    height: float = letter[1]
    margin: float = 36.0
    header_info_height: float = 68.0
    cover_aspect: float = 640.0 / 480.0

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def header_image_height(self) -> float:
        return self.content_height / 16 + self.margin + self.header_info_height

    @property
    def header_width(self) -> float:
        """Width left for header text beside the cover area."""
        return self.content_width - self.header_image_height * self.cover_aspect


def two_column_layout(geometry: PageGeometry = PageGeometry()) -> RegionLayout:
    """Two columns on page 1 below the header, two full-height columns after.

    Page-1 columns stop below the header block; subsequent-page
    columns run to half a margin from the top. The footer strip sits
    in the lower half of the bottom margin.
    """
    m = geometry.margin
    w = geometry.content_width
    h = geometry.content_height

    left_x1 = m
    left_x2 = left_x1 + (w / 2 - m / 2)
    right_x1 = m + w / 2 + m / 2
    right_x2 = right_x1 + (w / 2 - m)

    first_top = m + (h - (geometry.header_image_height - m / 2))
    next_top = m + (h - m / 2)

    first_page = (
        Region(Rect.from_corners(left_x1, m, left_x2, first_top), PageAffinity.FIRST),
        Region(Rect.from_corners(right_x1, m, right_x2, first_top), PageAffinity.FIRST),
    )
    subsequent_pages = (
        Region(Rect.from_corners(left_x1, m, left_x2, next_top), PageAffinity.SUBSEQUENT),
        Region(Rect.from_corners(right_x1, m, right_x2, next_top), PageAffinity.SUBSEQUENT),
    )
    footer = Region(Rect.from_corners(m, 0, w, m / 2), PageAffinity.FOOTER)

    return RegionLayout(first_page, subsequent_pages, footer)


def header_layout(geometry: PageGeometry = PageGeometry()) -> HeaderLayout:
    """Title and info rectangles at the top of page 1."""
    m = geometry.margin
    info_height = geometry.header_info_height
    title_height = geometry.header_image_height - info_height
    right = m + geometry.header_width

    title_y = geometry.height - (title_height + m / 2)
    info_y = geometry.height - geometry.header_image_height + 4

    return HeaderLayout(
        title=Rect.from_corners(m, title_y, right, title_y + title_height),
        info=Rect.from_corners(m, info_y, right, info_y + info_height),
    )
