"""Catalog loading and validation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from greenpath.catalog import default_catalog, load_catalog
from greenpath.domain.enums import ActivityCategory
from greenpath.domain.exceptions import CatalogError, UnknownOptionError

_FIXTURE = Path(__file__).resolve().parents[1] / "fixtures" / "catalog_da_nang.json"


def _payload() -> dict:
    return json.loads(_FIXTURE.read_text(encoding="utf-8"))


def test_default_catalog_contents():
    catalog = default_catalog()

    assert catalog.baseline_emission == 390
    assert [t.id for t in catalog.transports] == ["t1", "t2", "t3"]
    assert [h.id for h in catalog.lodgings] == ["h1", "h2"]
    assert [a.id for a in catalog.activities_in(ActivityCategory.SHOP)] == ["s1", "s2"]
    assert [a.id for a in catalog.activities_in(ActivityCategory.RESTAURANT)] == ["r1", "r2"]
    assert {c.id: c.reward for c in catalog.challenges} == {"c1": 1000, "c2": 500, "c3": 50}


def test_load_catalog_from_file():
    catalog = load_catalog(_FIXTURE)

    assert catalog.destination == "Da Nang, Vietnam"
    assert catalog.baseline_emission == 300
    assert catalog.lodging("eco").emission == 12.5
    assert catalog.challenge("beach").reward == 120


def test_load_catalog_from_string_path():
    assert load_catalog(str(_FIXTURE)).transport("bus").price == 25


def test_load_catalog_from_mapping_uses_default_baseline():
    payload = _payload()
    payload.pop("baseline_emission")
    assert load_catalog(payload).baseline_emission == 390


def test_missing_emission_is_rejected():
    payload = _payload()
    del payload["transports"][0]["emission"]

    with pytest.raises(CatalogError) as excinfo:
        load_catalog(payload)
    assert "transports.0.emission" in str(excinfo.value)


def test_missing_fee_is_rejected():
    payload = _payload()
    del payload["activities"][1]["fee"]
    with pytest.raises(CatalogError):
        load_catalog(payload)


def test_negative_price_is_rejected():
    payload = _payload()
    payload["lodgings"][0]["price"] = -1
    with pytest.raises(CatalogError):
        load_catalog(payload)


def test_non_positive_challenge_reward_is_rejected():
    payload = _payload()
    payload["challenges"][0]["reward"] = 0
    with pytest.raises(CatalogError):
        load_catalog(payload)


def test_duplicate_activity_ids_are_rejected():
    payload = _payload()
    payload["activities"][1]["id"] = "m1"

    with pytest.raises(CatalogError) as excinfo:
        load_catalog(payload)
    assert "duplicate activity ids: m1" in str(excinfo.value)


def test_missing_file_is_a_catalog_error(tmp_path):
    with pytest.raises(CatalogError):
        load_catalog(tmp_path / "nope.json")


def test_invalid_json_is_a_catalog_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_non_object_json_is_a_catalog_error(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_lookup_of_unknown_ids_raises():
    catalog = default_catalog()
    for lookup in (catalog.transport, catalog.lodging, catalog.activity, catalog.challenge):
        with pytest.raises(UnknownOptionError):
            lookup("missing")
    assert catalog.find_activity("missing") is None
