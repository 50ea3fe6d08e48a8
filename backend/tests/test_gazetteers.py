"""Tests for the gazetteer bundle and its YAML override."""

from services.gazetteers import COMPANIES, Gazetteer, load_gazetteer


def test_canonical_and_surface_forms(gazetteer):
    assert gazetteer.canonical("stanford") == "stanford university"
    assert gazetteer.canonical("google") == "google"
    assert gazetteer.surface_forms("stanford university") == {"stanford", "stanford university"}
    assert {"pm", "product manager"} <= gazetteer.surface_forms("product manager")


def test_dictionaries_feed_entity_fields(gazetteer):
    assert set(gazetteer.dictionaries()) == {"companies", "roles", "schools", "skills"}


def test_yaml_override(tmp_path):
    path = tmp_path / "gazetteer.yaml"
    path.write_text(
        "companies: [acme, globex]\n"
        "aliases:\n"
        "  acme inc: acme\n"
        "concepts:\n"
        "  conglomerates: [acme, globex]\n",
        encoding="utf-8",
    )
    gazetteer = load_gazetteer(path)
    assert gazetteer.companies == frozenset({"acme", "globex"})
    assert gazetteer.canonical("acme inc") == "acme"
    assert gazetteer.concepts == {"conglomerates": ("acme", "globex")}
    # tables missing from the file keep the embedded defaults
    assert gazetteer.roles == Gazetteer().roles


def test_empty_yaml_is_the_embedded_gazetteer(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_gazetteer(path).companies == COMPANIES
