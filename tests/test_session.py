from datetime import timedelta

import pytest

from asyncnet.request import (
    GetRequest,
    HeadRequest,
    Option,
    PostMultipartRequest,
    PostRequest,
    Request,
)
from asyncnet.net_types import MultipartContentPart
from asyncnet.session import AsyncSession


def test_cookies_in_memory_by_default():
    session = AsyncSession()
    request = session.make_request(GetRequest, "https://localhost/")
    assert request.get_option(Option.COOKIE_FILE) == Request.COOKIE_MEMORY
    assert request.get_option(Option.URL) == "https://localhost/"


def test_default_headers_inherited():
    session = AsyncSession()
    session.set_default_headers(["A: 1"])
    session.add_default_header("B: 2")
    request = session.make_request(GetRequest, "u")
    assert request.get_option(Option.HTTP_HEADER) == ["A: 1", "B: 2"]


def test_set_default_headers_replaces():
    session = AsyncSession()
    session.add_default_header("A: 1")
    session.set_default_headers(["C: 3"])
    request = session.make_request(GetRequest, "u")
    assert request.get_option(Option.HTTP_HEADER) == ["C: 3"]


def test_request_changes_do_not_leak_into_session():
    session = AsyncSession()
    session.set_default_headers(["A: 1"])
    first = session.make_request(GetRequest, "u")
    first.add_headers(["Test-Header: 123"])
    first.set_url_parameters({"test": "test1"})
    second = session.make_request(GetRequest, "v")
    assert second.get_option(Option.HTTP_HEADER) == ["A: 1"]
    assert second.get_option(Option.URL) == "v"
    assert first.get_option(Option.URL) == "u?test=test1"


def test_session_settings_inherited():
    session = AsyncSession()
    session.set_max_redirects(3)
    session.set_verbose(True)
    session.set_timeout(timedelta(seconds=10))
    session.set_cookie_file("cookies.txt")
    request = session.make_request(HeadRequest, "u")
    assert request.get_option(Option.MAX_REDIRS) == 3
    assert request.get_option(Option.FOLLOW_LOCATION) is True
    assert request.get_option(Option.VERBOSE) is True
    assert request.get_option(Option.TIMEOUT) == 10
    assert request.get_option(Option.COOKIE_FILE) == "cookies.txt"
    assert request.get_option(Option.NO_BODY) is True


def test_make_post_request():
    session = AsyncSession()
    data = "testdata=true&str=mmm"
    request = session.make_request(PostRequest, "https://localhost/post", data)
    assert isinstance(request, PostRequest)
    assert request.get_option(Option.POST_FIELDS) == data
    assert request.get_option(Option.COOKIE_FILE) == Request.COOKIE_MEMORY


def test_make_multipart_request():
    session = AsyncSession()
    part = MultipartContentPart("test", "test1")
    request = session.make_request(PostMultipartRequest, "u", [part])
    assert request.get_option(Option.HTTP_POST) == [part]


def test_make_request_rejects_non_request_class():
    session = AsyncSession()
    with pytest.raises(TypeError):
        session.make_request(dict, "u")