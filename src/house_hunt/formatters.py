from house_hunt.errors import AreaSearchError
from house_hunt.realtor_dataclasses import ListingRecord


def format_listing(record: ListingRecord) -> str:
    address = record.address
    description = record.description
    return (
        f'{address.line}, {address.city}, {address.state_code}, {address.postal_code}\n'
        f'Link: {record.href}\n'
        f'List Price: {record.list_price}\n'
        f'List Date: {record.formatted_list_date}\n'
        f'Status: {record.status}\n'
        f'Price Reduced Amount: {record.price_reduced_amount}\n'
        f'Last Sold Price: {record.last_sold_price}\n'
        f'Sqft: {description.sqft}\n'
        f'Beds: {description.beds}\n'
        f'Baths: {description.baths}\n'
    )


def format_area_failure(area: str, error: AreaSearchError) -> str:
    return f"Search area '{area}' failed ({error.kind}): {error}\n"
