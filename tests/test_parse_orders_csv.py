import pytest

from data_ingestion.errors import EmptyInputError, MalformedHeaderError
from data_ingestion.parse_orders_csv import ingest, parse_order_year, parse_sales, split_csv_line
from data_ingestion.sample_orders import SAMPLE_ORDERS_CSV

HEADER = "name,segment,state,city,order_date,ship_mode,sales"


def test_ingest_sample_dataset():
    store = ingest(SAMPLE_ORDERS_CSV)

    assert len(store.records) == 15
    assert store.years == {2022, 2023}
    assert store.sorted_years() == [2023, 2022]

    first = store.records[0]
    assert first.name == "John Doe"
    assert first.segment == "Consumer"
    assert first.state == "California"
    assert first.city == "Los Angeles"
    assert first.order_date == "2023-01-15"
    assert first.ship_mode == "Standard"
    assert first.sales == pytest.approx(150.50)
    assert first.year == 2023


@pytest.mark.parametrize("raw", ["", "   \n\t\n", "h1,h2\n", "h1,h2\n\n   \n"])
def test_ingest_rejects_empty_or_header_only(raw):
    with pytest.raises(EmptyInputError):
        ingest(raw)


def test_ingest_rejects_blank_header():
    with pytest.raises(MalformedHeaderError):
        ingest(" , ,\nJohn,CA,10\n")


def test_field_count_mismatch_is_skipped_and_parsing_continues():
    raw = "\n".join([
        HEADER,
        "A,Consumer,Texas,Austin,2023-01-01,Standard,10",
        "B,Consumer,Texas,Austin,2023-01-01,Standard",
        "C,Consumer,Texas,Austin,2023-01-01,Standard,10,extra",
        "D,Consumer,Ohio,Akron,2023-01-01,Standard,5",
    ])
    store = ingest(raw)

    assert [r.name for r in store.records] == ["A", "D"]


def test_unparsable_sales_become_zero_and_row_survives():
    raw = "\n".join([
        HEADER,
        "A,Consumer,Texas,Austin,2023-01-01,Standard,abc",
        "B,Consumer,Texas,Austin,2023-01-01,Standard,",
        "C,Consumer,Texas,Austin,2023-01-01,Standard,12.5",
    ])
    store = ingest(raw)

    assert [r.sales for r in store.records] == [0.0, 0.0, 12.5]


def test_unparsable_date_leaves_year_unset():
    raw = "\n".join([
        HEADER,
        "A,Consumer,Texas,Austin,not a date,Standard,10",
        "B,Consumer,Texas,Austin,,Standard,10",
        "C,Consumer,Texas,Austin,2021-06-30,Standard,10",
    ])
    store = ingest(raw)

    assert [r.year for r in store.records] == [None, None, 2021]
    assert store.years == {2021}


def test_relative_date_words_do_not_create_a_year():
    raw = "\n".join([
        HEADER,
        "A,Consumer,Texas,Austin,now,Standard,10",
        "B,Consumer,Texas,Austin,today,Standard,10",
    ])
    store = ingest(raw)

    assert [r.year for r in store.records] == [None, None]
    assert store.years == set()


def test_blank_lines_and_crlf_are_tolerated():
    raw = HEADER + "\r\n\r\nA,Consumer,Texas,Austin,2023-01-01,Standard,10\r\n   \r\n"
    store = ingest(raw)

    assert len(store.records) == 1
    assert store.records[0].sales == 10.0


def test_unknown_and_missing_columns():
    store = ingest("state,sales,region\nTexas,10,South\n")
    record = store.records[0]

    assert record.state == "Texas"
    assert record.name == ""
    assert record.year is None
    assert record.extra == {"region": "South"}


def test_records_are_immutable():
    store = ingest(SAMPLE_ORDERS_CSV)
    with pytest.raises(Exception):
        store.records[0].sales = 1.0


def test_split_csv_line_trims_values():
    assert split_csv_line(" a , b,c ") == ["a", "b", "c"]


@pytest.mark.parametrize("value, expected", [
    ("2023-01-15", 2023),
    ("01/15/2020", 2020),
    ("2019-12-31T23:00:00", 2019),
    ("garbage", None),
    ("now", None),
    ("today", None),
    (" Today ", None),
    ("", None),
    (None, None),
])
def test_parse_order_year(value, expected):
    assert parse_order_year(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("150.50", 150.5),
    ("42", 42.0),
    ("1e3", 1000.0),
    ("abc", 0.0),
    ("12abc", 0.0),
    ("", 0.0),
    (None, 0.0),
    ("inf", 0.0),
])
def test_parse_sales(value, expected):
    assert parse_sales(value) == expected
