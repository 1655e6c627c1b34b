import io
import json

import main
from models.substringsearcher import SubstringSearcher

NAMES = ["Fort Sterling", "Lymhurst", "Martlock", "Thetford"]


def test_get_returns_names():
    searcher = SubstringSearcher(NAMES)
    assert searcher.get("ster") == ["Fort Sterling"]
    assert sorted(searcher.get("t")) == ["Fort Sterling", "Lymhurst", "Martlock", "Thetford"]
    assert searcher.get("zz") == []

def test_get_deduplicates():
    searcher = SubstringSearcher(["Thetford"])
    # "t" occurs three times in "thetford"
    assert searcher.get("t") == ["Thetford"]

def test_add_skips_bad_names():
    searcher = SubstringSearcher(["Lymhurst", "bad\ud800", "Martlock"])
    assert searcher.strings == ["Lymhurst", "Martlock"]
    assert searcher.get("lock") == ["Martlock"]
    assert searcher.add("Caerleon")
    assert searcher.get("leon") == ["Caerleon"]

def test_cli_run():
    out = io.StringIO()
    answered = main.run(SubstringSearcher(NAMES), io.StringIO("LOCK\nnothing\n"), out)
    assert answered == 2
    assert out.getvalue().splitlines() == ["LOCK: Martlock", "nothing: no matches"]

def test_cli_main(tmp_path, monkeypatch, capsys):
    path = tmp_path / "names.json"
    path.write_text(json.dumps({"locations": NAMES}), encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("hurst\n"))
    assert main.main([str(path)]) == 0
    assert capsys.readouterr().out == "hurst: Lymhurst\n"

def test_load_default_choices():
    names = main.load_choices(main.CHOICES_FILE_PATH)
    assert "Fort Sterling" in names
