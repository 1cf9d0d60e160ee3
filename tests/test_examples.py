## pointfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Everyday data wrangling written point-free, checked against the imperative version.

import json
from urllib.parse import urlencode

import pointfl.api as P


def products():
    return [
        {'description': 't-shirt', 'qty': 2, 'value': 20},
        {'description': 'jeans', 'qty': 1, 'value': 30},
        {'description': 'boots', 'qty': 1, 'value': 40},
    ]


def test_products_totals():
    imperative_qty = sum(p['qty'] for p in products())
    imperative_amount = sum(p['qty'] * p['value'] for p in products())

    total_qty = P.compose(P.sum_, P.pluck('qty'))
    piped_total_qty = P.pipe(P.pluck('qty'), P.sum_)
    amount = P.compose(P.sum_, P.map_(P.compose(P.product, P.props(['value', 'qty']))))

    assert total_qty(products()) == 4 == imperative_qty
    assert piped_total_qty(products()) == 4
    assert amount(products()) == 110 == imperative_amount
    assert P.run('map((props(["value", "qty"]) | product)) | sum', products()) == 110


def test_filter_by_value():
    value_above_35 = P.compose(lambda v: v > 35, P.prop('value'))
    assert P.filter_(value_above_35, products()) == [{'description': 'boots', 'qty': 1, 'value': 40}]


def test_query_params_either_string_or_mapping():
    get_params = P.if_else(lambda p: isinstance(p, str), P.identity, urlencode)
    assert get_params(P.prop('params', {'params': {'a': 1, 'b': 2}})) == 'a=1&b=2'
    assert get_params(P.prop('params', {'params': 'a=1&b=2'})) == 'a=1&b=2'


def test_json_encode_if_not_string():
    prepare = P.if_else(P.not_(lambda r: isinstance(r, str)), P.ary(json.dumps, 1), P.identity)
    assert prepare(P.prop('response', {'response': 'OK'})) == 'OK'
    assert prepare(P.prop('response', {'response': {'a': 1, 'b': 2}})) == '{"a": 1, "b": 2}'


def test_fall_back_to_previous_record():
    obj = {'shipper_country': 'NL', 'consignee_country': '', 'pickup_hub_id': 5}
    old_obj = {'shipper_country': 'NL', 'consignee_country': 'US', 'pickup_hub_id': 5}
    get_prop = P.either(P.partial_r(P.prop, obj), P.partial_r(P.prop, old_obj))

    assert get_prop('shipper_country') == 'NL'
    assert get_prop('consignee_country') == 'US'


def test_upper_specific_fields():
    obj = {'shipper_country': 'nl', 'consignee_country': 'ca', 'name': 'John'}
    countries = ['shipper_country', 'consignee_country']
    expected = {'shipper_country': 'NL', 'consignee_country': 'CA', 'name': 'John'}

    merged = {**obj, **P.map_(P.ary(str.upper, 1), P.select_keys(countries, obj))}
    assert merged == expected

    to_upper_some_fields = P.converge(
        lambda a, b: {**a, **b},
        [P.always(obj), P.pipe(P.select_keys(countries), P.map_(P.ary(str.upper, 1)))],
    )
    assert to_upper_some_fields(obj) == expected

    assert P.map_keys(str.upper, countries, obj) == expected
    assert obj['shipper_country'] == 'nl'
