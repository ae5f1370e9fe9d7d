from httpreq import RequestContext


def test_get_decodes_values_of_get_requests():
    context = RequestContext({"q": "hello+world%21"})

    assert context.get("q") == "hello world!"


def test_get_keeps_values_of_other_methods():
    context = RequestContext({"q": "hello+world"}, method="post")

    assert context.method == "POST"
    assert context.get("q") == "hello+world"


def test_from_query_string():
    context = RequestContext.from_query_string("?q=a%26b&user%5Bid%5D=7&flag")

    assert context.get("q") == "a&b"
    assert context.get("user.id") == "7"
    assert context.get("flag") == ""


def test_set_has_delete():
    context = RequestContext()

    context.set("user[name]", "ann")
    assert context.has("user.name")
    assert context.get("user") == {"name": "ann"}

    context.delete("user.name")
    assert not context.has("user.name")
    assert context.get("user.name", "none") == "none"


def test_params_are_copied():
    params = {"a": "1"}
    context = RequestContext(params)

    context.set("b", "2")

    assert params == {"a": "1"}
    assert context.params == {"a": "1", "b": "2"}


def test_nested_values_are_decoded():
    context = RequestContext.from_query_string(
        "user[name]=J%C3%B6rg&user[tags][0]=a+b&user[tags][1]=c%2Fd"
    )

    assert context.get("user") == {"name": "Jörg", "tags": {"0": "a b", "1": "c/d"}}
    assert context.get("user.name") == "Jörg"


def test_lists_are_decoded():
    context = RequestContext({"tags": ["a+b", "%C3%A9"]})

    assert context.get("tags") == ["a b", "é"]


def test_stored_values_stay_encoded():
    context = RequestContext.from_query_string("q=50%25")

    assert context.params == {"q": "50%25"}
    assert context.get("q") == "50%"


def test_from_query_string_with_other_method():
    context = RequestContext.from_query_string("q=50%25+off&user[id]=7", method="post")

    assert context.method == "POST"
    assert context.params == {"q": "50% off", "user": {"id": "7"}}
    assert context.get("q") == "50% off"
