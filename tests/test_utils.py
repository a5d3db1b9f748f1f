from __future__ import annotations

import utils
from models.options import EditOptions


def test_encode_form_empty():
    assert utils.encode_form(None) == ""
    assert utils.encode_form({}) == ""


def test_encode_form_booleans_and_none():
    assert utils.encode_form({"locked": True, "sharing": False, "skip": None}) == "locked=true&sharing=false"


def test_encode_form_quotes_values():
    assert utils.encode_form({"title": "Q&A night"}) == "title=Q%26A%20night"


def test_encode_form_brackets_nested_values():
    encoded = utils.encode_form({"owner": {"id": 7}, "tags": ["space", "rockets"]})

    assert encoded == "owner%5Bid%5D=7&tags%5B0%5D=space&tags%5B1%5D=rockets"


def test_encode_form_model_drops_unset_fields():
    assert utils.encode_form(EditOptions(description="Weekly")) == "description=Weekly"


def test_options_dict_copies_mapping():
    options = {"description": "Weekly"}

    copied = utils.options_dict(options)
    copied["title"] = "Show"

    assert options == {"description": "Weekly"}


def test_with_query():
    assert utils.with_query("/channels/1.json", "") == "/channels/1.json"
    assert utils.with_query("/channels/1.json", "a=1") == "/channels/1.json?a=1"
    assert utils.with_query("/channels.json?page=2", "a=1") == "/channels.json?page=2&a=1"


def test_format_time():
    assert utils.format_time(999) == "999.00ns"
    assert utils.format_time(1_500_000) == "1.50ms"
