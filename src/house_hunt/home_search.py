from concurrent.futures import Future, ThreadPoolExecutor
import queue
import threading
from typing import Callable, Iterator

from house_hunt import realtor_dataclasses as rdc
from house_hunt.errors import AreaSearchError, InvalidInput, SearchCancelled
from house_hunt.formatters import format_area_failure, format_listing
from house_hunt.listing_client import RealtorListingClient
from house_hunt.logging_utils import get_logger

logger = get_logger(__name__)


class ResultSink:
    '''
    Unbounded multi-producer, single-consumer channel with a countdown
    barrier built in. Each of the `producers` calls `producer_done()` exactly
    once; the channel closes after the last call, so iterating it yields
    every item put and then stops.
    '''

    __closed = object()

    def __init__(self, producers: int):
        self.__queue: queue.SimpleQueue = queue.SimpleQueue()
        self.__lock = threading.Lock()
        self.__outstanding = producers
        self.__finished = 0
        if producers == 0:
            self.__queue.put(self.__closed)

    def put(self, item: rdc.SearchBlock) -> None:
        self.__queue.put(item)

    def producer_done(self) -> None:
        with self.__lock:
            if self.__outstanding == 0:
                raise RuntimeError('producer_done called more times than producers were registered')
            self.__outstanding -= 1
            self.__finished += 1
            is_last = self.__outstanding == 0
        if is_last:
            self.__queue.put(self.__closed)

    @property
    def finished_producers(self) -> int:
        with self.__lock:
            return self.__finished

    def __iter__(self) -> Iterator[rdc.SearchBlock]:
        while True:
            item = self.__queue.get()
            if item is self.__closed:
                return
            yield item


class HouseHunt:
    '''
    Fans one SearchCriteria out to one worker thread per area and merges
    whatever they produce into a single AggregatedResult. Blocks arrive
    first-finished-first-collected across areas; within an area they keep
    the order the API returned them in.
    '''

    def __init__(
        self,
        client: RealtorListingClient | None = None,
        formatter: Callable[[rdc.ListingRecord], str] = format_listing,
    ):
        self.__client = client or RealtorListingClient()
        self.__format = formatter


    def run_search(self, criteria: rdc.SearchCriteria, cancel: threading.Event | None = None) -> str:
        return self.collect(criteria, cancel).text


    def collect(self, criteria: rdc.SearchCriteria, cancel: threading.Event | None = None) -> rdc.AggregatedResult:
        queries = criteria.area_queries()
        if not queries:
            raise InvalidInput('At least one search area is required', 'areas')

        sink = ResultSink(producers=len(queries))
        result = rdc.AggregatedResult()
        logger.info('Starting search', extra={'areas': [q.area for q in queries]})

        with ThreadPoolExecutor(max_workers=len(queries), thread_name_prefix='house-hunt') as executor:
            futures: list[Future] = [
                executor.submit(self.__search_area, query, sink, cancel) for query in queries
            ]
            for block in sink:
                result.blocks.append(block)

        result.completed_areas = sink.finished_producers
        # surfaces anything that wasn't an AreaSearchError
        for future in futures:
            future.result()

        logger.info('Search finished', extra={
            'completed_areas': result.completed_areas,
            'listings': result.listing_count,
            'failed_areas': len(result.failures),
        })
        return result


    def __search_area(self, query: rdc.AreaQuery, sink: ResultSink, cancel: threading.Event | None) -> None:
        try:
            if cancel is not None and cancel.is_set():
                raise SearchCancelled('Search was cancelled before the request was sent', query.area)
            for record in self.__client.fetch(query):
                sink.put(rdc.SearchBlock(area=query.area, text=self.__format(record)))
        except AreaSearchError as e:
            logger.warning('Search area failed', extra={'area': query.area, 'kind': e.kind, 'error': str(e)})
            sink.put(rdc.SearchBlock(area=query.area, text=format_area_failure(query.area, e), error=e))
        finally:
            sink.producer_done()
