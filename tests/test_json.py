import json

from safeurl import URL
from safeurl.json import URLEncoder, dumps


def test_dumps_url_values():
    data = {"homepage": URL("http://example.com"), "name": "Example"}

    assert dumps(data) == '{"homepage":"http://example.com/","name":"Example"}'


def test_dumps_url_values_with_base():
    url = URL("../another/path", base="http://example.com/this/is/a/path")

    assert dumps([url]) == '["http://example.com/this/is/another/path"]'


def test_dumps_options():
    data = {"homepage": URL("http://example.com")}

    assert dumps(data, indent=4) == '{\n    "homepage": "http://example.com/"\n}'


def test_url_encoder_with_standard_json():
    data = {"homepage": URL("http://example.com")}

    assert json.loads(json.dumps(data, cls=URLEncoder)) == {
        "homepage": "http://example.com/"
    }
