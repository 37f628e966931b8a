import pytest

from scripts.lib.config import StatsType, load_sections, load_settings, parse_sections


def test_default_sections_file():
    sections = load_sections()
    by_cat = {s.category: s for s in sections}

    assert len(sections) == len(StatsType)
    assert by_cat[StatsType.OFFENSE].anchor == "player_offense"
    assert by_cat[StatsType.OFFENSE].mandatory
    assert by_cat[StatsType.KICKING].mandatory
    assert not by_cat[StatsType.ADV_DEFENSE].mandatory
    assert by_cat[StatsType.ADV_RECEIVING].anchor == "receiving_advanced"


def test_parse_sections_strips_hash_and_defaults_optional():
    (s,) = parse_sections({"sections": [{"category": "Returns", "anchor": "#returns"}]})
    assert s.category is StatsType.RETURNS
    assert s.anchor == "returns"
    assert s.mandatory is False


@pytest.mark.parametrize("cfg", [
    {},
    {"sections": []},
    {"sections": [{"category": "punting", "anchor": "punting"}]},
    {"sections": [{"category": "offense"}]},
    {"sections": [{"category": "offense", "anchor": "a"}, {"category": "offense", "anchor": "b"}]},
])
def test_parse_sections_rejects_bad_config(cfg):
    with pytest.raises(ValueError):
        parse_sections(cfg)


def test_load_settings_reads_env(monkeypatch, tmp_path):
    path = tmp_path / "sections.yml"
    path.write_text("sections:\n  - category: kicking\n    anchor: kicking\n    mandatory: true\n",
                    encoding="utf-8")
    monkeypatch.setenv("PFR_DOMAIN", "https://mirror.test/")
    monkeypatch.setenv("PFR_TIMEOUT", "5")

    s = load_settings(path)

    assert s.domain == "https://mirror.test"
    assert s.timeout == 5.0
    assert s.encoding == "latin-1"
    assert [x.category for x in s.sections] == [StatsType.KICKING]


def test_missing_sections_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sections(tmp_path / "nope.yml")
