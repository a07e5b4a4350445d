from house_hunt.errors import FetchFailed
from house_hunt.formatters import format_area_failure, format_listing
from house_hunt.realtor_dataclasses import ListingRecord
from house_hunt.scrapers import RealtorListingsParser

from conftest import load_fixture, load_fixture_text


def _first_record() -> ListingRecord:
    return RealtorListingsParser().parse(load_fixture_text('home_search_75204.json'))[0]


def test_block_layout():
    text = format_listing(_first_record())

    assert text.splitlines() == [
        '3619 Cole Ave, Dallas, TX, 75204',
        'Link: https://www.realtor.com/realestateandhomes-detail/M9281736452',
        'List Price: 419900',
        'List Date: 23-07-04',
        'Status: for_sale',
        'Price Reduced Amount: 7500',
        'Last Sold Price: 312000',
        'Sqft: 1450',
        'Beds: 3',
        'Baths: 2',
    ]
    assert text.endswith('\n')


def test_every_fixture_value_appears_exactly_once():
    raw = load_fixture('home_search_75204.json')['data']['home_search']['results'][0]
    text = format_listing(_first_record())

    address = raw['location']['address']
    for value in (address['line'], address['city'], address['postal_code'], raw['href'],
                  raw['list_price'], raw['price_reduced_amount'], raw['last_sold_price'],
                  raw['status'], raw['description']['sqft'], '23-07-04'):
        assert text.count(str(value)) == 1, value
    assert text.count(', TX,') == 1


def test_formatting_is_idempotent():
    record = _first_record()
    assert format_listing(record) == format_listing(record)


def test_zero_record_still_formats():
    text = format_listing(ListingRecord())
    assert text.startswith(', , , \nLink: \nList Price: 0\n')


def test_area_failure_notice():
    text = format_area_failure('Austin', FetchFailed('Listings API returned HTTP 403', 'Austin', 403))
    assert text == "Search area 'Austin' failed (FetchFailed): Listings API returned HTTP 403\n"
