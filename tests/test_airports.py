"""Airport alias normalisation and directory lookups."""

from __future__ import annotations

import json
import logging
from zoneinfo import ZoneInfo

from flight_keys.airports import AirportDirectory, AirportNormalizer
from flight_keys.airports.datasets import load_json


def test_normalize_maps_aliases():
    normalizer = AirportNormalizer({"HKG": "vhhh", "Chek Lap Kok": "VHHH"})
    assert normalizer.normalize("hkg") == "VHHH"
    assert normalizer.normalize(" H.K.G ") == "VHHH"
    assert normalizer.normalize("chek lap kok") == "VHHH"


def test_normalize_unknown_code_passes_through_cleaned():
    normalizer = AirportNormalizer()
    assert normalizer.normalize(" ks-fo ") == "KSFO"


def test_normalize_empty_after_cleaning():
    normalizer = AirportNormalizer({"HKG": "VHHH"})
    assert normalizer.normalize("") == ""
    assert normalizer.normalize("--") == "--"


def test_normalize_is_idempotent_for_canonical_codes():
    normalizer = AirportNormalizer({"HKG": "VHHH", "TPE": "RCTP"})
    for raw in ["hkg", "tpe", "KSFO", "x y"]:
        once = normalizer.normalize(raw)
        assert normalizer.normalize(once) == once


def test_bundled_aliases_load():
    normalizer = AirportNormalizer.from_dataset()
    assert len(normalizer) > 0
    assert normalizer.normalize("HKG") == "VHHH"


def test_missing_alias_dataset_falls_back_to_identity(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        normalizer = AirportNormalizer.from_dataset(tmp_path)
    assert len(normalizer) == 0
    assert normalizer.normalize("hkg") == "HKG"
    assert "identity mapping" in caplog.text


def test_broken_dataset_returns_none(tmp_path, caplog):
    (tmp_path / "airportAliases.json").write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert load_json("airportAliases.json", tmp_path) is None
    assert "Failed to parse" in caplog.text


def test_undecodable_dataset_falls_back_to_identity(tmp_path, caplog):
    (tmp_path / "airportAliases.json").write_bytes(b'{"HKG": "\xff\xfe"}')
    with caplog.at_level(logging.WARNING):
        normalizer = AirportNormalizer.from_dataset(tmp_path)
    assert len(normalizer) == 0
    assert normalizer.normalize("hkg") == "HKG"
    assert "Failed to parse" in caplog.text


def test_unreadable_dataset_path_returns_none(tmp_path, caplog):
    (tmp_path / "airportAliases.json").mkdir()
    with caplog.at_level(logging.WARNING):
        assert load_json("airportAliases.json", tmp_path) is None
        directory = AirportDirectory.from_dataset(tmp_path)
    assert directory.time_zone("HKG") is None
    assert "Failed to read" in caplog.text


def test_dataset_dir_overrides_bundled_data(tmp_path):
    (tmp_path / "airportAliases.json").write_text(
        json.dumps({"HKG": "XHKG", "bad": 1}), encoding="utf-8"
    )
    normalizer = AirportNormalizer.from_dataset(tmp_path)
    assert normalizer.normalize("HKG") == "XHKG"
    assert len(normalizer) == 1


def test_directory_time_zone_by_iata_and_icao():
    directory = AirportDirectory(
        {"VHHH": "HKG"}, {"HKG": ZoneInfo("Asia/Hong_Kong")}
    )
    assert directory.time_zone("hkg") == ZoneInfo("Asia/Hong_Kong")
    assert directory.time_zone(" vhhh ") == ZoneInfo("Asia/Hong_Kong")
    assert directory.time_zone("XXXX") is None
    assert directory.iata_code("vhhh") == "HKG"
    assert directory.iata_code("XXXX") is None


def test_bundled_directory_loads():
    directory = AirportDirectory.from_dataset()
    assert directory.time_zone("RJTT") == ZoneInfo("Asia/Tokyo")
    assert directory.iata_code("EGLL") == "LHR"


def test_directory_skips_unknown_zones(tmp_path):
    (tmp_path / "airports.json").write_text(
        json.dumps({"HKG": {"icao": "VHHH"}, "ZZZ": "not-a-dict"}),
        encoding="utf-8",
    )
    (tmp_path / "timezones.json").write_text(
        json.dumps({"airports": {"HKG": "Asia/Hong_Kong", "ZZZ": "Mars/Olympus"}}),
        encoding="utf-8",
    )
    directory = AirportDirectory.from_dataset(tmp_path)
    assert directory.time_zone("VHHH") == ZoneInfo("Asia/Hong_Kong")
    assert directory.time_zone("ZZZ") is None
