import requests

from house_hunt import realtor_dataclasses as rdc
from house_hunt.config import Settings, settings as default_settings
from house_hunt.errors import AreaSearchError, FetchFailed
from house_hunt.request_builder import RealtorSearchRequestBuilder
from house_hunt.logging_utils import get_logger
from house_hunt.scrapers import RealtorListingsParser, ResponseParser

logger = get_logger(__name__)


class RealtorListingClient:
    '''
    Runs one AreaQuery against the realtor listings API. Single attempt per
    call; every failure comes back as an AreaSearchError tagged with the area.

    `http` is anything with a requests-style `post`; defaults to the
    `requests` module so each call gets its own connection.
    '''

    def __init__(self, settings: Settings | None = None, http=None, parser: ResponseParser | None = None):
        self.__settings = settings or default_settings
        self.__http = http or requests
        self.__parser = parser or RealtorListingsParser(
            skip_unparsable_dates=self.__settings.SKIP_UNPARSABLE_DATES
        )
        if not self.__settings.REALTOR_API_KEY:
            logger.warning('realtorApiKey is not set; the listings API will reject requests')


    def fetch(self, query: rdc.AreaQuery) -> list[rdc.ListingRecord]:
        body = self.build_body(query)
        logger.info('Requesting listings', extra={'area': query.area, 'limit': body.limit})
        try:
            res = self.__http.post(
                self.__settings.REALTOR_LISTINGS_URL,
                json=body.to_dict(),
                headers=self.__headers(),
                timeout=self.__settings.HTTP_TIMEOUT_S,
            )
            res.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise FetchFailed(f'Listings API returned HTTP {status_code}', query.area, status_code) from e
        except requests.RequestException as e:
            raise FetchFailed(f'Request to listings API failed: {e}', query.area) from e

        try:
            records = self.__parser.parse(res.text)
        except AreaSearchError as e:
            e.area = query.area
            raise
        logger.info('Parsed listings', extra={'area': query.area, 'count': len(records)})
        return records


    @staticmethod
    def build_body(query: rdc.AreaQuery) -> rdc.ListingSearchBody:
        return (
            RealtorSearchRequestBuilder()
            .location(query.area)
            .limit(query.result_count)
            .listing_status(*query.status)
            .price_range(query.price_min, query.price_max)
            .beds(query.beds_min)
            .baths(query.baths_min)
            .sqft(query.sqft_min)
            .build()
        )


    def __headers(self) -> dict[str, str]:
        headers = {
            'content-type': 'application/json',
            'X-RapidAPI-Host': self.__settings.REALTOR_API_HOST,
        }
        if self.__settings.REALTOR_API_KEY:
            headers['X-RapidAPI-Key'] = self.__settings.REALTOR_API_KEY
        return headers
