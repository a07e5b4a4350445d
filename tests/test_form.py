import pytest

from house_hunt import __main__ as cli
from house_hunt.form import FIELD_PLACEHOLDERS, FormState, run_form, submit


VALID = ['75204,Austin', '100000', '500000', '2', '1', '800', 'Buy', '5']


class FakeHouseHunt:
    def __init__(self, text='3619 Cole Ave, Dallas, TX, 75204\n'):
        self.text = text
        self.searches = []

    def run_search(self, criteria, cancel=None):
        self.searches.append(criteria)
        return self.text


def _answers(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr('builtins.input', lambda prompt='': next(answers))


def test_focus_cycles_through_fields_and_submit_button():
    state = FormState()
    for _ in FIELD_PLACEHOLDERS:
        assert not state.on_submit
        state.focus_next()
    assert state.on_submit
    state.focus_next()
    assert state.focus_index == 0


def test_form_state_is_serializable():
    state = FormState(values=list(VALID), search_results='x')
    assert FormState.from_json(state.to_json()) == state


def test_submit_runs_search_with_parsed_criteria():
    house_hunt = FakeHouseHunt()
    state = submit(FormState(values=list(VALID)), house_hunt)

    assert state.search_results == house_hunt.text
    assert not state.loading and not state.typing
    assert house_hunt.searches[0].areas == ('75204', 'Austin')


def test_submit_with_bad_number_returns_to_form_without_searching():
    house_hunt = FakeHouseHunt()
    values = list(VALID)
    values[3] = 'two'
    state = submit(FormState(values=values), house_hunt)

    assert state.typing
    assert 'beds_min' in state.error
    assert state.values == values
    assert house_hunt.searches == []


def test_interactive_search_then_quit(monkeypatch, capsys):
    _answers(monkeypatch, VALID + ['q'])
    house_hunt = FakeHouseHunt()

    state = run_form(house_hunt)

    out = capsys.readouterr().out
    assert 'Your specifications are...' in out
    assert 'Here are the houses that we fetched for you:' in out
    assert '3619 Cole Ave, Dallas, TX, 75204' in out
    assert len(house_hunt.searches) == 1
    assert state.values == VALID


def test_invalid_input_keeps_values_and_search_again_reuses_them(monkeypatch, capsys):
    bad_then_fixed = VALID[:1] + ['lots'] + VALID[2:]
    # second pass: enter on every field except price keeps the earlier values
    answers = bad_then_fixed + ['', '100000', '', '', '', '', '', ''] + ['r'] + [''] * 8 + ['q']
    _answers(monkeypatch, answers)
    house_hunt = FakeHouseHunt()

    run_form(house_hunt)

    out = capsys.readouterr().out
    assert 'Please fix your input' in out
    assert len(house_hunt.searches) == 2
    assert house_hunt.searches[0] == house_hunt.searches[1]


def test_cli_runs_one_search_from_flags(monkeypatch, capsys):
    house_hunt = FakeHouseHunt()
    monkeypatch.setattr(cli, 'HouseHunt', lambda: house_hunt)

    code = cli.main(['--areas', '75204,Austin', '--price-min', '100000', '--price-max', '500000',
                     '--beds-min', '2', '--baths-min', '1', '--sqft-min', '800', '--intent', 'Buy',
                     '--results', '5'])

    assert code == 0
    assert '3619 Cole Ave' in capsys.readouterr().out
    assert house_hunt.searches[0].result_count == 5


def test_cli_reports_invalid_input(monkeypatch, capsys):
    monkeypatch.setattr(cli, 'HouseHunt', lambda: pytest.fail('should not search'))

    code = cli.main(['--areas', ' , ', '--results', '5'])

    assert code == 2
    assert 'search area' in capsys.readouterr().err


def test_cli_without_areas_opens_form(monkeypatch):
    opened = []
    monkeypatch.setattr(cli, 'run_form', lambda: opened.append(True))
    assert cli.main([]) == 0
    assert opened == [True]


@pytest.mark.parametrize('interrupt', [EOFError, KeyboardInterrupt])
def test_end_of_input_or_ctrl_c_quits_cleanly(monkeypatch, interrupt):
    answers = iter(VALID[:3])

    def fake_input(prompt=''):
        try:
            return next(answers)
        except StopIteration:
            raise interrupt

    monkeypatch.setattr('builtins.input', fake_input)
    house_hunt = FakeHouseHunt()

    state = run_form(house_hunt)

    assert state.values[:3] == VALID[:3]
    assert house_hunt.searches == []


def test_cli_form_exits_zero_on_end_of_input(monkeypatch):
    def closed_stdin(prompt=''):
        raise EOFError

    monkeypatch.setattr('builtins.input', closed_stdin)
    monkeypatch.setattr(cli, 'run_form', lambda: run_form(FakeHouseHunt()))

    assert cli.main([]) == 0


def test_focus_previous_wraps_to_submit_button():
    state = FormState()
    state.focus_previous()
    assert state.on_submit
    state.focus_previous()
    assert state.focus_index == len(FIELD_PLACEHOLDERS) - 1


def test_less_than_goes_back_a_field(monkeypatch):
    # typo in the area, step back from the price and fix it
    answers = ['Dalas', '<', 'Dallas'] + VALID[1:] + ['q']
    _answers(monkeypatch, answers)
    house_hunt = FakeHouseHunt()

    run_form(house_hunt)

    assert house_hunt.searches[0].areas == ('Dallas',)


def test_failed_search_clears_loading():
    class BrokenHouseHunt:
        def run_search(self, criteria, cancel=None):
            raise RuntimeError('boom')

    state = FormState(values=list(VALID))
    with pytest.raises(RuntimeError):
        submit(state, BrokenHouseHunt())
    assert state.loading is False
