import json
import os

from passgen.config import DEFAULTS, build_generator, config_path, load_config, save_config
from passgen.lang import Language

def test_config_path_uses_appdata(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))
    assert config_path() == os.path.join(str(tmp_path), "Passgen", "config.json")

def test_missing_config_returns_defaults(tmp_path):
    cfg = load_config(str(tmp_path / "nope.json"))
    assert cfg == DEFAULTS
    cfg["length"] = 99
    assert DEFAULTS["length"] == 16

def test_save_and_load(tmp_path):
    path = str(tmp_path / "sub" / "config.json")
    save_config({"language": "russian", "length": 24}, path)
    cfg = load_config(path)
    assert cfg["language"] == "russian"
    assert cfg["length"] == 24
    assert cfg["mode"] == DEFAULTS["mode"]

def test_malformed_config_falls_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(str(path)) == DEFAULTS

def test_saved_file_is_json(tmp_path):
    path = str(tmp_path / "config.json")
    save_config(DEFAULTS, path)
    with open(path, "r", encoding="utf-8") as f:
        assert json.load(f) == DEFAULTS

def test_build_generator_modes():
    gen = build_generator(DEFAULTS)
    assert gen.rules.letters and gen.rules.uppercase and gen.rules.numbers and gen.rules.symbols
    assert gen.language is Language.ENGLISH

    gen = build_generator({"mode": "strong", "language": "japanese"})
    assert gen.rules.strong_usab
    assert gen.language is Language.JAPANESE

    gen = build_generator({"mode": "new"})
    assert gen.is_ruleset_clean()

    gen = build_generator({"mode": "new", "custom_charset": "01"})
    assert set(gen.generate(10)) <= {"0", "1"}

def test_build_generator_unknown_mode():
    try:
        build_generator({"mode": "chaos"})
        raised = False
    except ValueError:
        raised = True
    assert raised

def test_non_object_config_falls_back(tmp_path):
    path = tmp_path / "config.json"
    for content in ("[1, 2]", "42", '"english"', "null"):
        path.write_text(content, encoding="utf-8")
        assert load_config(str(path)) == DEFAULTS

def test_build_generator_non_string_language():
    try:
        build_generator({"mode": "default", "language": 7})
        raised = False
    except ValueError:
        raised = True
    assert raised
