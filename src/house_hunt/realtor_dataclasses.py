from dataclasses import dataclass, field
from enum import Enum
from dataclasses_json import config, dataclass_json

from house_hunt.errors import AreaSearchError


class Intent(Enum):
    BUY = 'buy'
    RENT = 'rent'

    @property
    def status_filter(self) -> tuple[str, ...]:
        if self is Intent.BUY:
            return ('for_sale', 'ready_to_build')
        return ('for_rent',)


@dataclass(frozen=True)
class AreaQuery:
    area: str
    price_min: int
    price_max: int
    beds_min: int
    baths_min: int
    sqft_min: int
    status: tuple[str, ...]
    result_count: int


@dataclass(frozen=True)
class SearchCriteria:
    areas: tuple[str, ...]
    price_min: int = 0
    price_max: int = 0
    beds_min: int = 0
    baths_min: int = 0
    sqft_min: int = 0
    intent: Intent = Intent.RENT
    result_count: int = 10

    def area_queries(self) -> list[AreaQuery]:
        return [
            AreaQuery(
                area=area,
                price_min=self.price_min,
                price_max=self.price_max,
                beds_min=self.beds_min,
                baths_min=self.baths_min,
                sqft_min=self.sqft_min,
                status=self.intent.status_filter,
                result_count=self.result_count,
            )
            for area in self.areas
        ]


def _omit_none():
    return field(default=None, metadata=config(exclude=lambda value: value is None))


@dataclass_json
@dataclass
class SortFields:
    direction: str = 'desc'
    field: str = 'list_date'


@dataclass_json
@dataclass
class PriceRange:
    min: int = 0
    max: int | None = _omit_none()


@dataclass_json
@dataclass
class Minimum:
    min: int = 0


@dataclass_json
@dataclass
class ListingSearchBody:
    postal_code: str
    limit: int
    offset: int = 0
    status: list[str] = field(default_factory=list)
    sort_fields: SortFields = field(default_factory=SortFields)
    list_price: PriceRange = field(default_factory=PriceRange)
    beds: Minimum = field(default_factory=Minimum)
    baths: Minimum = field(default_factory=Minimum)
    sqft: Minimum = field(default_factory=Minimum)


@dataclass_json
@dataclass(frozen=True)
class ListingAddress:
    line: str = ''
    city: str = ''
    state_code: str = ''
    postal_code: str = ''


@dataclass_json
@dataclass(frozen=True)
class ListingDescription:
    sqft: int = 0
    beds: int = 0
    baths: int = 0


@dataclass_json
@dataclass(frozen=True)
class ListingRecord:
    address: ListingAddress = field(default_factory=ListingAddress)
    description: ListingDescription = field(default_factory=ListingDescription)
    href: str = ''
    list_price: int = 0
    price_reduced_amount: int = 0
    last_sold_price: int = 0
    list_date: str = ''
    formatted_list_date: str = ''
    status: str = ''


@dataclass(frozen=True)
class SearchBlock:
    area: str
    text: str
    error: AreaSearchError | None = None


@dataclass
class AggregatedResult:
    blocks: list[SearchBlock] = field(default_factory=list)
    completed_areas: int = 0

    @property
    def failures(self) -> list[SearchBlock]:
        return [block for block in self.blocks if block.error is not None]

    @property
    def listing_count(self) -> int:
        return sum(1 for block in self.blocks if block.error is None)

    @property
    def text(self) -> str:
        return '\n'.join(block.text for block in self.blocks)
