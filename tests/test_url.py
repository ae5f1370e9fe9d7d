from httpx import URL

from httpreq._utils import add_params, build_query_pairs


def test_appends_query_string():
    assert add_params("https://example.com/search", {"q": "cats"}) == (
        "https://example.com/search?q=cats"
    )


def test_keeps_existing_parameters():
    assert add_params("https://example.com/search?lang=en", {"q": "cats"}) == (
        "https://example.com/search?lang=en&q=cats"
    )


def test_new_values_replace_existing_ones():
    url = add_params("https://example.com/search?q=dogs&lang=en", {"q": "cats"})

    assert URL(url).params["q"] == "cats"
    assert URL(url).params["lang"] == "en"


def test_no_parameters_leaves_url_untouched():
    assert add_params("https://example.com/a?b=c#frag", {}) == "https://example.com/a?b=c#frag"


def test_nested_parameters_use_brackets():
    url = add_params("https://example.com/", {"tags": ["a", "b"], "user": {"id": 7}})

    params = URL(url).params
    assert params["tags[0]"] == "a"
    assert params["tags[1]"] == "b"
    assert params["user[id]"] == "7"


def test_query_pairs():
    assert build_query_pairs({"on": True, "off": False, "skip": None, "n": 1.5}) == [
        ("on", "1"),
        ("off", "0"),
        ("n", "1.5"),
    ]
