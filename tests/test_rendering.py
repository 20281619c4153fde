from recordstore_core.rendering import render_record, render_records
from recordstore_core.schemas import Record


def test_render_record_fixed_field_order() -> None:
    record = Record.from_dict({"age": 30, "email": "a@b.com", "id": "1"})

    assert render_record(record) == '{"id":"1","email":"a@b.com","age":30}'


def test_render_integral_float_age_without_fraction() -> None:
    record = Record.from_dict({"id": "1", "email": "a@b.com", "age": 30.0})

    assert render_record(record) == '{"id":"1","email":"a@b.com","age":30}'


def test_render_fractional_age() -> None:
    record = Record.from_dict({"id": "1", "email": "a@b.com", "age": 30.25})

    assert render_record(record).endswith('"age":30.25}')


def test_render_escapes_strings() -> None:
    record = Record.from_dict({"id": 'a"b', "email": "x@y.z", "age": 1})

    assert render_record(record) == '{"id":"a\\"b","email":"x@y.z","age":1}'


def test_render_records_joins_without_whitespace() -> None:
    records = [
        Record.from_dict({"id": "1", "email": "a@b.com", "age": 30}),
        Record.from_dict({"id": "2", "email": "c@d.com", "age": 40}),
    ]

    assert render_records(records) == (
        '[{"id":"1","email":"a@b.com","age":30},{"id":"2","email":"c@d.com","age":40}]'
    )


def test_render_empty_store() -> None:
    assert render_records([]) == "[]"


def test_render_large_age_in_exponent_form() -> None:
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": 1000000})).endswith(
        '"age":1e+06}'
    )
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": 1234567.5})).endswith(
        '"age":1.2345675e+06}'
    )


def test_render_small_age_in_exponent_form() -> None:
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": 0.00001})).endswith(
        '"age":1e-05}'
    )
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": 0.0001})).endswith(
        '"age":0.0001}'
    )


def test_render_plain_form_below_a_million() -> None:
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": 999999})).endswith(
        '"age":999999}'
    )
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": -0.5})).endswith(
        '"age":-0.5}'
    )
    assert render_record(Record.from_dict({"id": "1", "email": "e", "age": 0})).endswith(
        '"age":0}'
    )
