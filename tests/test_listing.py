from vpnlist_updater.listing import find_next, parse_body
from vpnlist_updater.settings import ProtoType

PAGE = (
    "<html><body>"
    '<a href="http://host/one.ovpn" class="x">Server udp 1</a>\n'
    '<a href="http://host/two.ovpn">TCP server</a>\n'
    '<a href="http://host/three">Home</a>'
    "</body></html>"
)


def test_parse_body_classifies_links():
    assert parse_body(PAGE) == [
        (ProtoType.UDP, "http://host/one.ovpn"),
        (ProtoType.TCP, "http://host/two.ovpn"),
        (ProtoType.UNKNOWN, "http://host/three"),
    ]


def test_udp_wins_when_both_named():
    page = '<a href="u">tcp / UDP</a>'
    assert parse_body(page) == [(ProtoType.UDP, "u")]


def test_find_next_end_index_is_after_closing_tag():
    found = find_next(PAGE, 0)
    assert found is not None
    proto, url, end = found
    assert (proto, url) == (ProtoType.UDP, "http://host/one.ovpn")
    assert PAGE[end - 4:end] == "</a>"
    assert "one.ovpn" not in PAGE[end:]


def test_find_next_from_later_index():
    first = find_next(PAGE, 0)
    second = find_next(PAGE, first[2])
    assert second[:2] == (ProtoType.TCP, "http://host/two.ovpn")
    assert second[2] > first[2]


def test_find_next_out_of_range():
    assert find_next(PAGE, len(PAGE) + 1) is None
    assert find_next(PAGE, len(PAGE)) is None


def test_incomplete_anchors_give_nothing():
    assert parse_body('<a href="http://host/x">udp') == []
    assert parse_body('<a href="http://host/x') == []
    assert parse_body("no links at all") == []


def test_stops_at_first_incomplete_anchor():
    page = '<a href="a">UDP</a><a href="b">tcp'
    assert parse_body(page) == [(ProtoType.UDP, "a")]


def test_non_ascii_text_around_links():
    page = 'Сервер <a href="http://хост/1">Россия UDP</a> конец'
    assert parse_body(page) == [(ProtoType.UDP, "http://хост/1")]