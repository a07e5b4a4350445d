import re

from house_hunt import realtor_dataclasses as rdc
from house_hunt.errors import InvalidInput


class RealtorSearchRequestBuilder:
    '''
    Fluent builder for the listings API request body. `location` has to be
    called first and only once; every other filter is optional.
    '''

    def __init__(self):
        self.__body: rdc.ListingSearchBody | None = None

    def location(self, location: str):
        if self.__body is not None:
            raise RuntimeError('Can only call location once for each lookup.')

        self.__body = rdc.ListingSearchBody(postal_code=location, limit=0)
        return self

    def __validate_loc_added(self) -> rdc.ListingSearchBody:
        if self.__body is None:
            raise RuntimeError('location must be called before any other methods')
        return self.__body

    def limit(self, count: int):
        self.__validate_loc_added().limit = count
        return self

    def listing_status(self, *statuses: str):
        self.__validate_loc_added().status = list(statuses)
        return self

    def price_range(self, min: int = 0, max: int = 0):
        # max of 0 means no upper bound, so the key is left out of the body
        self.__validate_loc_added().list_price = rdc.PriceRange(min=min, max=max or None)
        return self

    def beds(self, min: int = 0):
        self.__validate_loc_added().beds = rdc.Minimum(min=min)
        return self

    def baths(self, min: int = 0):
        self.__validate_loc_added().baths = rdc.Minimum(min=min)
        return self

    def sqft(self, min: int = 0):
        self.__validate_loc_added().sqft = rdc.Minimum(min=min)
        return self

    def sort(self, field: str = 'list_date', direction: str = 'desc'):
        self.__validate_loc_added().sort_fields = rdc.SortFields(direction=direction, field=field)
        return self

    def build(self) -> rdc.ListingSearchBody:
        return self.__validate_loc_added()


_INTEGER_PATTERN = re.compile(r'^[+-]?[0-9]+$')


def _parse_int(value: str, field: str) -> int:
    text = (value or '').strip()
    if not _INTEGER_PATTERN.match(text):
        raise InvalidInput(f'{field} must be a whole number, got {value!r}', field)
    number = int(text)
    if number < 0:
        raise InvalidInput(f'{field} can not be negative', field)
    return number


def _parse_areas(value: str) -> tuple[str, ...]:
    areas: list[str] = []
    for area in (value or '').split(','):
        area = area.strip()
        if area and area not in areas:
            areas.append(area)
    if not areas:
        raise InvalidInput('At least one search area is required', 'areas')
    return tuple(areas)


def _parse_intent(value: str) -> rdc.Intent:
    return rdc.Intent.BUY if (value or '').strip().casefold() == 'buy' else rdc.Intent.RENT


def build_search_criteria(
    areas: str,
    price_min: str,
    price_max: str,
    beds_min: str,
    baths_min: str,
    sqft_min: str,
    intent: str,
    result_count: str,
) -> rdc.SearchCriteria:
    '''
    Validates the raw form values and returns the SearchCriteria for one
    submission. Raises InvalidInput before anything touches the network.
    '''
    criteria = rdc.SearchCriteria(
        areas=_parse_areas(areas),
        price_min=_parse_int(price_min, 'price_min'),
        price_max=_parse_int(price_max, 'price_max'),
        beds_min=_parse_int(beds_min, 'beds_min'),
        baths_min=_parse_int(baths_min, 'baths_min'),
        sqft_min=_parse_int(sqft_min, 'sqft_min'),
        intent=_parse_intent(intent),
        result_count=_parse_int(result_count, 'result_count'),
    )

    if criteria.price_max and criteria.price_max < criteria.price_min:
        raise InvalidInput('Maximum price must be 0 (no limit) or at least the minimum price', 'price_max')
    if criteria.result_count < 1:
        raise InvalidInput('Number of results must be at least 1', 'result_count')
    return criteria
