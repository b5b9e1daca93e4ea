from unittest.mock import patch

from main import main, parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.city is None
    assert args.lat is None
    assert args.time == "00:00:00"
    assert (args.width, args.height) == (1280, 800)


def test_main_wires_components(monkeypatch):
    monkeypatch.setenv("ASTRONOMY_API_APP_ID", "app")
    monkeypatch.setenv("ASTRONOMY_API_APP_SECRET", "secret")

    with patch("main.StarMap") as star_map, \
            patch("main.BodyPositions") as body_positions, \
            patch("main.ConstellationLoader") as loader:
        main(["--lat", "52.5", "--lon", "13.4", "--date", "2024-06-21", "--constellations", "lines.json"])

    loader.assert_called_once_with("lines.json")
    body_positions.assert_called_once_with("app", "secret")
    sky = star_map.return_value
    sky.load_constellations.assert_called_once_with(loader.return_value)
    sky.load_bodies.assert_called_once_with(
        body_positions.return_value, 52.5, 13.4,
        elevation=0, date="2024-06-21", time="00:00:00",
    )
    sky.show.assert_called_once_with()
