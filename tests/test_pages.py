import pytest

from scripts.lib.markup import parse_html
from scripts.lib.pages import (
    absolute_url,
    parse_game_id,
    parse_season_page,
    parse_season_week_page,
    parse_week_num,
    parse_year,
)

DOMAIN = "https://www.pro-football-reference.com"


@pytest.mark.parametrize("url,year,week", [
    (f"{DOMAIN}/years/2021/week_1.htm", 2021, 1),
    (f"{DOMAIN}/years/2021/week_10.htm", 2021, 10),
    (f"{DOMAIN}/years/2019/week_17.htm", 2019, 17),
])
def test_parse_year_and_week(url, year, week):
    assert parse_year(url) == year
    assert parse_week_num(url) == week


def test_parse_year_rejects_other_urls():
    with pytest.raises(ValueError):
        parse_year(f"{DOMAIN}/years/2021/")


def test_absolute_url():
    assert absolute_url("/boxscores/x.htm", DOMAIN) == f"{DOMAIN}/boxscores/x.htm"
    assert absolute_url("https://other/x.htm", DOMAIN) == "https://other/x.htm"


def test_season_page_keeps_week_links_in_order():
    soup = parse_html("""
    <div id="div_week_games">
      <a href="/years/2021/week_1.htm">Week 1</a>
      <a href="/years/2021/week_2.htm">Week 2</a>
      <a href="/years/2021/games.htm">Schedule</a>
      <a href="/years/2021/week_3.htm"><span>Week 3</span></a>
    </div>
    <a href="/years/2021/week_9.htm">Week 9</a>""")
    assert parse_season_page(soup, DOMAIN) == [
        f"{DOMAIN}/years/2021/week_1.htm",
        f"{DOMAIN}/years/2021/week_2.htm",
    ]


def test_week_page_keeps_only_final_games():
    soup = parse_html("""
    <table><tr><td class="right gamelink"><a href="/boxscores/202109090tam.htm">F</a></td></tr>
    <tr><td class="right gamelink"><a href="/boxscores/202109120atl.htm">Preview</a></td></tr>
    <tr><td class="right gamelink"><a href="/boxscores/202109120buf.htm">F</a></td></tr></table>""")
    assert parse_season_week_page(soup, DOMAIN) == [
        f"{DOMAIN}/boxscores/202109090tam.htm",
        f"{DOMAIN}/boxscores/202109120buf.htm",
    ]


def test_parse_game_id_from_canonical_link():
    soup = parse_html('<head><link rel="canonical" href="https://x/boxscores/202109090tam.htm"></head>')
    assert parse_game_id(soup) == "202109090tam"


def test_parse_game_id_without_canonical_link():
    with pytest.raises(ValueError):
        parse_game_id(parse_html("<head></head>"))
