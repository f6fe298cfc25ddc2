import pytest

from restview.codepoints import FontAwesome, codepoint


def test_documented_values():
    assert codepoint("glass") == 0xF000
    assert codepoint("star") == 0xF005
    assert codepoint("renren") == 0xF18B


def test_codepoint_matches_enum():
    assert codepoint("star") == FontAwesome.STAR
    assert codepoint("refresh") == FontAwesome.REFRESH
    assert codepoint("twitter") == 0xF099


@pytest.mark.parametrize(
    "alias, original",
    [
        ("gear", "cog"),
        ("gears", "cogs"),
        ("reply", "mail_reply"),
        ("mail_reply_all", "reply_all"),
        ("star_half_empty", "star_half_full"),
        ("eur", "euro"),
        ("usd", "dollar"),
        ("inr", "rupee"),
        ("jpy", "yen"),
        ("cny", "renminbi"),
        ("krw", "won"),
        ("btc", "bitcoin"),
    ],
)
def test_aliases_share_codepoint(alias, original):
    assert codepoint(alias) == codepoint(original)
    assert FontAwesome[alias.upper()] is FontAwesome[original.upper()]


@pytest.mark.parametrize(
    "spelling",
    ["arrow-left", "arrow_left", "ARROW-LEFT", "icon-arrow-left", "icon_arrow_left"],
)
def test_name_normalisation(spelling):
    assert codepoint(spelling) == FontAwesome.ARROW_LEFT


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        codepoint("no-such-icon")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        codepoint("")


def test_all_codepoints_in_font_range():
    values = [codepoint(name.lower()) for name in FontAwesome.__members__]
    assert min(values) == 0xF000
    assert max(values) == 0xF18B
    assert all(0xF000 <= value <= 0xF18B for value in values)


def test_skipped_codepoint_absent():
    with pytest.raises(ValueError):
        FontAwesome(0xF020)


def test_lookup_by_value_returns_canonical_member():
    assert FontAwesome(int(FontAwesome.GEAR)) is FontAwesome.COG
    assert FontAwesome(int(FontAwesome.REPLY)) is FontAwesome.MAIL_REPLY


def test_every_member_roundtrips_through_codepoint():
    for name, member in FontAwesome.__members__.items():
        assert codepoint(name.lower().replace("_", "-")) == member