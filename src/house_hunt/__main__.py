import argparse
import sys

from house_hunt.errors import InvalidInput
from house_hunt.form import run_form
from house_hunt.home_search import HouseHunt
from house_hunt.logging_utils import configure_logging
from house_hunt.request_builder import build_search_criteria


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='house-hunt',
        description='Search realtor listings across several areas at once.',
    )
    parser.add_argument('--areas', help='Comma separated cities or postal codes, e.g. "75204,Austin". '
                                        'Omit to fill in the interactive form instead.')
    parser.add_argument('--price-min', default='0')
    parser.add_argument('--price-max', default='0', help='0 means no upper limit')
    parser.add_argument('--beds-min', default='0')
    parser.add_argument('--baths-min', default='0')
    parser.add_argument('--sqft-min', default='0')
    parser.add_argument('--intent', default='Buy', help='Buy or Rent')
    parser.add_argument('--results', default='10', help='Number of results per search area')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging()
    if args.areas is None:
        run_form()
        return 0

    try:
        criteria = build_search_criteria(
            args.areas,
            args.price_min,
            args.price_max,
            args.beds_min,
            args.baths_min,
            args.sqft_min,
            args.intent,
            args.results,
        )
    except InvalidInput as e:
        print(f'house-hunt: {e}', file=sys.stderr)
        return 2

    print(HouseHunt().run_search(criteria))
    return 0


if __name__ == '__main__':
    sys.exit(main())
