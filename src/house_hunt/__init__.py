from house_hunt.request_builder import build_search_criteria
from house_hunt.home_search import HouseHunt
from house_hunt.errors import (
    HouseHuntError,
    InvalidInput,
    AreaSearchError,
    FetchFailed,
    ParseFailed,
    DateFormatFailed,
    SearchCancelled,
)
