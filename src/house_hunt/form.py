from dataclasses import dataclass, field
from dataclasses_json import dataclass_json

from house_hunt.errors import InvalidInput
from house_hunt.home_search import HouseHunt
from house_hunt.request_builder import build_search_criteria


FIELD_PLACEHOLDERS: tuple[str, ...] = (
    'Define your search area(s) Ex.(Dallas,Houston) or (75204,Austin)',
    'Minimum Price',
    'Maximum Price',
    'Bed Minimum',
    'Bath Minimum',
    'Square Footage Minimum',
    'Looking to Buy or Rent?',
    'Specify Number of Results to see per search area',
)


@dataclass_json
@dataclass
class FormState:
    '''Terminal form state. Kept apart from SearchCriteria; the search core never sees it.'''
    values: list[str] = field(default_factory=lambda: [''] * len(FIELD_PLACEHOLDERS))
    focus_index: int = 0
    typing: bool = True
    loading: bool = False
    search_results: str = ''
    error: str = ''

    def set_value(self, value: str) -> None:
        self.values[self.focus_index] = value

    def focus_next(self) -> None:
        # one past the last field is the submit button
        self.focus_index = (self.focus_index + 1) % (len(FIELD_PLACEHOLDERS) + 1)

    def focus_previous(self) -> None:
        self.focus_index = (self.focus_index - 1) % (len(FIELD_PLACEHOLDERS) + 1)

    @property
    def on_submit(self) -> bool:
        return self.focus_index == len(FIELD_PLACEHOLDERS)

    def reset(self) -> None:
        self.focus_index = 0
        self.typing = True
        self.loading = False
        self.search_results = ''
        self.error = ''


def print_inputs(state: FormState) -> None:
    print()
    print('Your specifications are...')
    for placeholder, value in zip(FIELD_PLACEHOLDERS, state.values):
        print(f'{placeholder}: {value}')
    print()


def submit(state: FormState, house_hunt: HouseHunt) -> FormState:
    '''
    Runs one search for the current values. On InvalidInput the state goes
    back to typing with the error set and the values untouched.
    '''
    state.typing = False
    state.loading = True
    try:
        criteria = build_search_criteria(*state.values)
    except InvalidInput as e:
        state.loading = False
        state.typing = True
        state.error = str(e)
        state.focus_index = 0
        return state

    try:
        state.search_results = house_hunt.run_search(criteria)
    finally:
        state.loading = False
    state.error = ''
    return state


def _fill(state: FormState) -> None:
    # `<` steps back to the previous field
    state.focus_index = 0
    while not state.on_submit:
        placeholder = FIELD_PLACEHOLDERS[state.focus_index]
        current = state.values[state.focus_index]
        prompt = f'> {placeholder}' + (f' [{current}]' if current else '') + ': '
        answer = input(prompt).strip()
        if answer == '<':
            if state.focus_index > 0:
                state.focus_previous()
            continue
        if answer:
            state.set_value(answer)
        state.focus_next()


def run_form(house_hunt: HouseHunt | None = None, state: FormState | None = None) -> FormState:
    '''
    Interactive loop: fill the form, search, then `r` to search again or `q`
    to quit. Ctrl+C or end of input also quits, returning the state as it was.
    '''
    house_hunt = house_hunt or HouseHunt()
    state = state or FormState()
    try:
        while True:
            if state.typing:
                _fill(state)
                print_inputs(state)
                print('Fetching your listings...')
                submit(state, house_hunt)
                if state.error:
                    print(f'Please fix your input: {state.error}')
                    continue

            print('Here are the houses that we fetched for you: \n')
            print(state.search_results)
            choice = input('Press (q to quit, or r to search again) ').strip().lower()
            if choice == 'r':
                state.reset()
                continue
            return state
    except (KeyboardInterrupt, EOFError):
        print()
        return state
