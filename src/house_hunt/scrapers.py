from abc import ABC, abstractmethod
from datetime import datetime
import json
import re
from typing import Any

from house_hunt import realtor_dataclasses as rdc
from house_hunt.errors import DateFormatFailed, ParseFailed
from house_hunt.logging_utils import get_logger

logger = get_logger(__name__)

_RFC3339 = re.compile(r'\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})')


def format_list_date(date_string: str) -> str:
    '''
    Turns an RFC3339 timestamp such as `2023-07-04T00:00:00Z` into
    `23-07-04`. The date is taken in the timestamp's own offset. Date-only
    and offset-less values are rejected.
    '''
    if not isinstance(date_string, str) or not _RFC3339.fullmatch(date_string):
        raise DateFormatFailed(f'Unparsable list date {date_string!r}')
    try:
        date_obj = datetime.fromisoformat(date_string)
    except ValueError as e:
        raise DateFormatFailed(f'Unparsable list date {date_string!r}') from e
    return date_obj.strftime('%y-%m-%d')


def _to_int(value: Any) -> int:
    if value is None or value == '' or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, str) and re.fullmatch(r'\s*[+-]?\d+\s*', value):
            return int(value)
        # inf and nan from the JSON decoder land here as OverflowError / ValueError
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _to_str(value: Any) -> str:
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


class ResponseParser(ABC):
    @abstractmethod
    def parse(self, content: str) -> Any:
        ...


class RealtorListingsParser(ResponseParser):

    def __init__(self, skip_unparsable_dates: bool = True):
        self.__skip_unparsable_dates = skip_unparsable_dates


    def parse(self, content: str) -> list[rdc.ListingRecord]:
        results = self.__get_results(content)
        records: list[rdc.ListingRecord] = []
        for result in results:
            try:
                records.append(self.__get_listing(_as_dict(result)))
            except DateFormatFailed as e:
                if not self.__skip_unparsable_dates:
                    raise
                logger.warning('Skipping listing with unparsable list date',
                               extra={'href': _as_dict(result).get('href'), 'error': str(e)})
        return records


    def __get_results(self, content: str) -> list:
        try:
            data = json.loads(content)
        except (TypeError, ValueError) as e:
            raise ParseFailed(f'Response body is not valid JSON: {e}') from e

        home_search = _as_dict(_as_dict(_as_dict(data).get('data')).get('home_search'))
        results = home_search.get('results')
        if not isinstance(results, list):
            raise ParseFailed('Response is missing data.home_search.results')
        return results


    def __get_listing(self, result: dict) -> rdc.ListingRecord:
        address = _as_dict(_as_dict(result.get('location')).get('address'))
        description = _as_dict(result.get('description'))
        list_date = _to_str(result.get('list_date'))

        return rdc.ListingRecord(
            address=rdc.ListingAddress(
                line=_to_str(address.get('line')),
                city=_to_str(address.get('city')),
                state_code=_to_str(address.get('state_code')),
                postal_code=_to_str(address.get('postal_code')),
            ),
            description=rdc.ListingDescription(
                sqft=_to_int(description.get('sqft')),
                beds=_to_int(description.get('beds')),
                baths=_to_int(description.get('baths')),
            ),
            href=_to_str(result.get('href')),
            list_price=_to_int(result.get('list_price')),
            price_reduced_amount=_to_int(result.get('price_reduced_amount')),
            last_sold_price=_to_int(result.get('last_sold_price')),
            list_date=list_date,
            formatted_list_date=format_list_date(list_date) if list_date else '',
            status=_to_str(result.get('status')),
        )
