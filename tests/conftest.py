import pytest

from scripts.lib.config import Section, Settings, StatsType

DOMAIN = "https://pfr.test"

OFFENSE_TABLE = """
<div id="all_player_offense">
<table id="player_offense">
<thead><tr><th data-stat="player">Player</th><th data-stat="pass_yds">Yds</th></tr></thead>
<tbody>
<tr><th data-stat="player" data-append-csv="{pid}"><a href="/players/X/{pid}.htm">{name}</a></th><td data-stat="team">TB</td><td data-stat="pass_yds">{yds}</td></tr>
<tr class="thead"><th>Player</th><th>Tm</th></tr>
</tbody>
</table>
</div>
"""

SIMPLE_TABLE = """
<table id="{anchor}">
<tbody>
<tr><th data-stat="player" data-append-csv="{pid}"><a href="/p.htm">{name}</a></th><td data-stat="{stat}">{val}</td></tr>
</tbody>
</table>
"""


def game_page(game_id="202109090tam", pid="BradTo00", name="Tom Brady", yds="379",
              sections=("defense", "returns", "kicking"), commented=True):
    """Synthetic box-score page; every table except offense is comment-hidden."""
    anchors = {"defense": "player_defense", "returns": "returns", "kicking": "kicking",
               "adv_passing": "passing_advanced"}
    parts = [
        "<html><head>",
        f'<link rel="canonical" href="https://www.pro-football-reference.com/boxscores/{game_id}.htm">',
        "</head><body>",
        OFFENSE_TABLE.format(pid=pid, name=name, yds=yds),
    ]
    for s in sections:
        table = SIMPLE_TABLE.format(anchor=anchors[s], pid=pid, name=name, stat=f"{s}_stat", val="1")
        if commented:
            table = "<div>\n<!--" + table + "\n--></div>"
        parts.append(table)
    parts.append("</body></html>")
    return "\n".join(parts)


@pytest.fixture
def settings():
    return Settings(
        sections=(
            Section(StatsType.OFFENSE, "player_offense", True),
            Section(StatsType.DEFENSE, "player_defense", True),
            Section(StatsType.RETURNS, "returns", True),
            Section(StatsType.KICKING, "kicking", True),
            Section(StatsType.ADV_PASSING, "passing_advanced", False),
        ),
        domain=DOMAIN,
    )
