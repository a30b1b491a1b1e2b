from __future__ import annotations

import textwrap

import pandas as pd
import pytest

from airnet.data.loaders import load_airports, load_routes
from airnet.data.reports import DEFAULT_RANKING_FILENAME, rank_airports, write_degree_ranking
from airnet.network.domain_types import Airport, Route


def _write(tmp_path, name: str, text: str):
    path = tmp_path / name
    path.write_text(textwrap.dedent(text).strip() + "\n", encoding="utf-8")
    return path


def test_load_airports_reads_ids_as_strings(tmp_path):
    path = _write(
        tmp_path,
        "airports.csv",
        """
        Label,ID,Latitude,Longitude
        Goroka Airport,001,-6.0817,145.392
        "Madang, Airport",2,,
        """,
    )

    airports = load_airports(path)

    assert list(airports) == ["001", "2"]
    goroka = airports["001"]
    assert goroka.name == "Goroka Airport"
    assert goroka.latitude == pytest.approx(-6.0817)
    assert goroka.has_coordinates
    assert goroka.degree == 0 and goroka.degree2 == 0
    assert airports["2"].name == "Madang, Airport"
    assert airports["2"].latitude is None
    assert not airports["2"].has_coordinates


def test_load_airports_without_coordinate_columns(tmp_path):
    path = _write(tmp_path, "airports.csv", "Label,ID\nAlpha,A\n")
    airports = load_airports(path)
    assert airports == {"A": Airport(id="A", name="Alpha")}


def test_load_airports_rejects_missing_columns(tmp_path):
    path = _write(tmp_path, "airports.csv", "Name,Code\nAlpha,A\n")
    with pytest.raises(ValueError, match="Label, ID"):
        load_airports(path)


def test_load_routes_keeps_file_order(tmp_path):
    path = _write(
        tmp_path,
        "routes.csv",
        """
        Departure,Destination
        10,20
        20,10
        10,20
        """,
    )

    routes = load_routes(path)

    assert routes == [Route("10", "20"), Route("20", "10"), Route("10", "20")]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_routes(tmp_path / "nope.csv")


def test_rank_airports_sorts_by_degree_descending():
    airports = {
        "A": Airport(id="A", name="Alpha", degree=2, degree2=1),
        "B": Airport(id="B", name="Bravo", degree=7),
        "C": Airport(id="C", name="Charlie", degree=2),
    }

    ranking = rank_airports(airports)

    assert ranking["ID"].tolist() == ["B", "A", "C"]
    assert ranking["Degree"].tolist() == [7, 2, 2]
    assert ranking["Degree2"].tolist() == [0, 1, 0]


def test_write_degree_ranking_creates_parent_directories(tmp_path):
    airports = {"A": Airport(id="A", name="Alpha", degree=1)}
    target = tmp_path / "reports" / DEFAULT_RANKING_FILENAME

    written = write_degree_ranking(airports, target)

    assert written == target
    df = pd.read_csv(target, dtype={"ID": str})
    assert list(df.columns) == ["ID", "Name", "Degree", "Degree2"]
    assert df.iloc[0]["Name"] == "Alpha"


def test_na_like_ids_and_numeric_labels_are_kept_verbatim(tmp_path):
    airports_path = _write(
        tmp_path,
        "airports.csv",
        """
        Label,ID,Latitude,Longitude
        NA,NA,1.0,2.0
        007,N/A,,
        null,X,,
        ,EMPTY,,
        """,
    )
    routes_path = _write(
        tmp_path,
        "routes.csv",
        """
        Departure,Destination
        NA,X
        N/A,X
        ,X
        """,
    )

    airports = load_airports(airports_path)
    routes = load_routes(routes_path)

    assert list(airports) == ["NA", "N/A", "X", "EMPTY"]
    assert airports["NA"].name == "NA"
    assert airports["N/A"].name == "007"
    assert airports["N/A"].latitude is None
    assert airports["X"].name == "null"
    assert airports["EMPTY"].name == ""
    assert routes == [Route("NA", "X"), Route("N/A", "X")]
