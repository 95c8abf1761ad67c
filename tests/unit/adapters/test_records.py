"""Tests for record → entity builders."""

import pytest

from balancer.adapters.records import (
    customer_successes_from_records,
    customers_from_records,
    entities_from_scores,
    entities_with_score,
    parse_int_field,
)
from balancer.domain.entities.customer import Customer
from balancer.domain.entities.customer_success import CustomerSuccess

# ─── parse_int_field ─────────────────────────────────────────────────


def test_parse_int():
    assert parse_int_field({"id": 7}, "id") == 7


def test_parse_numeric_string():
    assert parse_int_field({"score": " 42 "}, "score") == 42


def test_parse_missing_key():
    with pytest.raises(ValueError, match="no 'score' field"):
        parse_int_field({"id": 1}, "score")


def test_parse_rejects_float_and_bool():
    with pytest.raises(ValueError, match="must be an integer"):
        parse_int_field({"score": 1.5}, "score")
    with pytest.raises(ValueError, match="must be an integer"):
        parse_int_field({"score": True}, "score")


def test_parse_rejects_text():
    with pytest.raises(ValueError, match="must be an integer"):
        parse_int_field({"id": "abc"}, "id")


# ─── builders ────────────────────────────────────────────────────────


def test_customer_successes_from_records():
    css = customer_successes_from_records([{"id": 1, "score": 60}, {"id": 2, "score": "20"}])
    assert css == [CustomerSuccess(id=1, score=60), CustomerSuccess(id=2, score=20)]


def test_customers_from_records_ignores_extra_keys():
    customers = customers_from_records([{"id": 3, "score": 70, "name": "ACME"}])
    assert customers == [Customer(id=3, score=70)]


def test_entities_from_scores_numbers_from_one():
    assert entities_from_scores([11, 21], Customer) == [
        Customer(id=1, score=11),
        Customer(id=2, score=21),
    ]


def test_entities_with_score():
    css = entities_with_score(3, 998, CustomerSuccess)
    assert [cs.id for cs in css] == [1, 2, 3]
    assert {cs.score for cs in css} == {998}


@pytest.mark.parametrize("raw", ["--5", "²", "٣", "-", ""])
def test_parse_rejects_malformed_numbers(raw):
    with pytest.raises(ValueError, match="must be an integer"):
        parse_int_field({"id": raw}, "id")


def test_parse_negative_string():
    assert parse_int_field({"score": "-3"}, "score") == -3
