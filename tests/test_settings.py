from pathlib import Path

from boggle_solver.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults(monkeypatch):
    for name in ("DICTIONARY_PATH", "TRIE_VARIANT", "MAX_RESULTS", "MAX_BOARD_CELLS", "INCLUDE_TIMINGS"):
        monkeypatch.delenv(name, raising=False)
    cfg = _fresh_settings()
    assert cfg.TRIE_VARIANT == "rway"
    assert cfg.MAX_RESULTS == 50
    assert cfg.MAX_BOARD_CELLS == 100
    assert cfg.INCLUDE_TIMINGS is True
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "dictionary.txt"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAX_RESULTS", "7")
    monkeypatch.setenv("INCLUDE_TIMINGS", "no")
    monkeypatch.setenv("TRIE_VARIANT", "ternary")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = _fresh_settings()
    assert cfg.MAX_RESULTS == 7
    assert cfg.INCLUDE_TIMINGS is False
    assert cfg.TRIE_VARIANT == "ternary"
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["INCLUDE_TIMINGS"] == cfg.INCLUDE_TIMINGS
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_BOARD_CELLS=36)
    assert errors == {}
    assert cfg.MAX_BOARD_CELLS == 36


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="12")
    assert errors == {}
    assert cfg.MAX_RESULTS == 12


def test_update_int_rejects_garbage():
    cfg = _fresh_settings()
    original = cfg.MAX_RESULTS
    errors = update_settings(cfg, MAX_RESULTS="lots")
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == original


def test_update_int_rejects_bool():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=True)
    assert "MAX_RESULTS" in errors


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.INCLUDE_TIMINGS
    errors = update_settings(cfg, INCLUDE_TIMINGS=not original)
    assert errors == {}
    assert cfg.INCLUDE_TIMINGS is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, INCLUDE_TIMINGS="false")
    assert errors == {}
    assert cfg.INCLUDE_TIMINGS is False

    errors = update_settings(cfg, INCLUDE_TIMINGS="true")
    assert errors == {}
    assert cfg.INCLUDE_TIMINGS is True


def test_update_bool_rejects_garbage():
    cfg = _fresh_settings()
    errors = update_settings(cfg, INCLUDE_TIMINGS="maybe")
    assert "INCLUDE_TIMINGS" in errors


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=10, MAX_BOARD_CELLS=25, INCLUDE_TIMINGS=False)
    assert errors == {}
    assert cfg.MAX_RESULTS == 10
    assert cfg.MAX_BOARD_CELLS == 25
    assert cfg.INCLUDE_TIMINGS is False


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    original = cfg.TRIE_VARIANT
    errors = update_settings(cfg, TRIE_VARIANT="ternary")
    assert "TRIE_VARIANT" in errors
    assert cfg.TRIE_VARIANT == original


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25


def test_update_field_named_like_the_config_argument():
    cfg = _fresh_settings()
    errors = update_settings(cfg, cfg=1)
    assert errors == {"cfg": "unknown setting"}
