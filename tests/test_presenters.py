import io
import logging

import pytest

from domain.entities.trade import TradeRecord
from application.interfaces.data_presenter import IDataPresenter
from application.services.aggregation_engine import AggregationEngine
from presentation.presenters import TabularPresenter, PresenterRegistry, create_default_registry
from presentation.presenters.tabular_presenter import format_number


def render(records):
    engine = AggregationEngine(presenter=TabularPresenter())
    for timestamp, instrument, quantity, price in records:
        engine.add_record(TradeRecord(timestamp=timestamp, instrument=instrument, quantity=quantity, price=price))
    sink = io.StringIO()
    engine.present(sink)
    return sink.getvalue()


def test_single_instrument_line():
    assert render([(100, "abc", 10, 5), (150, "abc", 20, 6)]) == "abc,50,30,5,6\n"


def test_instruments_in_ascending_order():
    output = render([(1, "zeta", 1, 1), (2, "alpha", 2, 3), (3, "mid", 1, 1)])

    assert [line.split(",")[0] for line in output.splitlines()] == ["alpha", "mid", "zeta"]


def test_negative_gap_is_rendered():
    assert render([(200, "xyz", 1, 1), (100, "xyz", 1, 1)]) == "xyz,-100,2,1,1\n"


def test_average_is_truncated_not_rounded():
    # 29 / 3 = 9.67
    output = render([(1, "abc", 1, 9), (2, "abc", 1, 10), (3, "abc", 1, 10)])

    assert output == "abc,1,3,9,10\n"


def test_zero_volume_reports_zero_average(caplog):
    with caplog.at_level(logging.WARNING):
        output = render([(1, "abc", 0, 10), (5, "abc", 0, 12)])

    assert output == "abc,4,0,0,12\n"
    assert any("abc" in r.getMessage() for r in caplog.records)


def test_empty_table_renders_nothing():
    assert render([]) == ""


@pytest.mark.parametrize("value, expected", [
    (30.0, "30"),
    (0.0, "0"),
    (1.5, "1.5"),
    (1234567.0, "1234567"),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_presenter_is_callable():
    class UpperPresenter(IDataPresenter):
        def render(self, sink, table):
            for instrument in table:
                sink.write(instrument.upper())

    engine = AggregationEngine(presenter=UpperPresenter())
    engine.add_record(TradeRecord(timestamp=1, instrument="abc", quantity=1, price=1))
    sink = io.StringIO()

    engine.present(sink)

    assert sink.getvalue() == "ABC"


def test_presenter_interface_is_abstract():
    with pytest.raises(TypeError):
        IDataPresenter()


def test_default_registry_has_tabular():
    registry = create_default_registry()

    assert isinstance(registry.require_presenter("tabular"), TabularPresenter)
    assert registry.get_statistics()['names'] == ["tabular"]


def test_unknown_presenter():
    registry = PresenterRegistry()

    assert registry.get_presenter("json") is None
    with pytest.raises(KeyError):
        registry.require_presenter("json")


def test_register_overrides_previous(caplog):
    registry = PresenterRegistry()
    first, second = TabularPresenter(), TabularPresenter()
    registry.register_presenter("tabular", first)

    with caplog.at_level(logging.WARNING):
        registry.register_presenter("tabular", second)

    assert registry.get_presenter("tabular") is second
    assert any("Sobrescrevendo" in r.getMessage() for r in caplog.records)


def test_overflowing_consideration_reports_zero_average(caplog):
    huge = float("9" * 200)

    with caplog.at_level(logging.WARNING):
        output = render([(1, "abc", huge, huge)])

    fields = output.rstrip("\n").split(",")
    assert fields[0] == "abc"
    assert fields[3] == "0"
    assert any("não finito" in r.getMessage() for r in caplog.records)


def test_overflowing_volume_reports_zero_average():
    # volume e consideração chegam a inf: inf / inf = nan
    output = render([(1, "abc", 1e308, 1), (2, "abc", 1e308, 1)])

    assert output == "abc,1,inf,0,1\n"
