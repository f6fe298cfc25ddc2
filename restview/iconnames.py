"""Named icons accepted by the icon factory, mapped to their code points."""

from __future__ import annotations

from .codepoints import FontAwesome

__all__ = ["named_codepoints", "lookup"]

# The names the icon factory registers when the icon font is initialised.
# Spelling is kept exactly as registered: some names use dashes, others
# underscores, and lookups match them verbatim.
_NAMES = """
    glass music search envelope heart star star-empty user film th-large th
    th-list ok remove zoom-in

    zoom-out off signal cog gear trash home file_alt time road download-alt
    download upload inbox play-circle repeat

    refresh list-alt lock flag headphones volume-off volume-down volume-up
    qrcode barcode tag tags book bookmark print

    camera font bold italic text-height text-width align-left align-center
    align-right align-justify list indent-left indent-right facetime-video
    picture

    pencil map-marker adjust tint edit share check move step-backward
    fast-backward backward play pause stop forward

    fast-forward step-forward eject chevron-left chevron-right plus-sign
    minus-sign remove-sign ok-sign question-sign info-sign screenshot
    remove-circle ok-circle ban-circle

    arrow-left arrow-right arrow-up arrow-down share-alt resize-full
    resize-small plus minus asterisk exclamation-sign gift leaf fire eye-open

    eye-close warning-sign plane calendar random comment magnet chevron-up
    chevron-down retweet shopping-cart folder-close folder-open
    resize-vertical resize-horizontal

    bar-chart twitter-sign facebook-sign camera-retro key cogs gears comments
    thumbs-up-alt thumbs-down-alt star-half heart-empty signout linkedin-sign
    pushpin external-link

    signin trophy github-sign upload-alt lemon phone check-empty
    bookmark-empty phone-sign twitter facebook github unlock credit-card rss

    hdd bullhorn bell certificate hand-right hand-left hand-up hand-down
    circle-arrow-left circle-arrow-right circle-arrow-up circle-arrow-down
    globe wrench tasks

    filter briefcase fullscreen

    group link cloud beaker cut copy paper-clip save sign-blank reorder
    list-ul list-ol strikethrough underline table

    magic truck pinterest pinterest-sign google-plus-sign google-plus money
    caret-down caret-up caret-left caret-right columns sort sort-down sort-up

    envelope-alt linkedin undo legal dashboard comment-alt comments-alt bolt
    sitemap umbrella paste lightbulb exchange cloud-download cloud-upload

    user-md stethoscope suitcase bell-alt coffee food file-text-alt building
    hospital ambulance medkit fighter-jet beer h-sign plus-sign-alt

    double-angle-left double-angle-right double-angle-up double-angle-down
    angle-left angle-right angle-up angle-down desktop laptop tablet
    mobile-phone circle-blank quote-left quote-right

    spinner circle reply mail_reply

    github-alt folder-close-alt folder-open-alt

    expand_alt collapse_alt smile frown meh gamepad keyboard flag_alt
    flag_checkered

    terminal code reply_all mail_reply_all star_half_full star_half_empty
    location_arrow crop code_fork unlink question info exclamation
    superscript subscript eraser puzzle_piece

    microphone microphone_off shield calendar_empty fire_extinguisher rocket
    maxcdn chevron_sign_left chevron_sign_right chevron_sign_up
    chevron_sign_down html5 css3 anchor unlock_alt

    bullseye ellipsis_horizontal ellipsis_vertical rss_sign play_sign ticket
    minus_sign_alt check_minus level_up level_down check_sign edit_sign
    external_link_sign share_sign

    compass

    collapse collapse_top expand euro eur gbp dollar usd rupee inr yen jpy
    renminbi cny won krw bitcoin btc file file_text sort_by_alphabet
    sort_by_alphabet_alt sort_by_attributes sort_by_attributes_alt

    sort_by_order sort_by_order_alt thumbs_up thumbs_down youtube_sign
    youtube xing xing_sign youtube_play dropbox stackexchange instagram
    flickr

    adn bitbucket bitbucket_sign tumblr tumblr_sign long_arrow_down
    long_arrow_up long_arrow_left long_arrow_right apple windows android
    linux dribble skype

    foursquare trello female male gittip sun moon archive bug vk weibo renren
""".split()

_CODEPOINTS: dict[str, int] = {
    name: int(FontAwesome[name.replace("-", "_").upper()]) for name in _NAMES
}


def named_codepoints() -> dict[str, int]:
    """Return a fresh mapping of every registered icon name to its code point."""
    return dict(_CODEPOINTS)


def lookup(name: str) -> int:
    """Return the code point registered under exactly ``name``.

    Raises KeyError if the name is not registered.
    """
    try:
        return _CODEPOINTS[name]
    except KeyError:
        raise KeyError(f"no icon registered as {name!r}") from None