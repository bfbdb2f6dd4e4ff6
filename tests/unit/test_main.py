from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from orphanage_form.form.models import SubmissionOutcome
from orphanage_form.main import main, parse_args


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.name == ""
        assert args.closed_on_weekends is False
        assert args.lat == 0.0
        assert args.images == []

    def test_full_arguments(self) -> None:
        args = parse_args([
            "--name", "Lar",
            "--description", "Casa",
            "--opening-hours", "9-5",
            "--closed-on-weekends",
            "--lat", "-3.7",
            "--lng", "-38.5",
            "a.png", "b.png",
        ])
        assert args.opening_hours == "9-5"
        assert args.closed_on_weekends is True
        assert args.lng == -38.5
        assert args.images == [Path("a.png"), Path("b.png")]


class TestMain:
    def test_success_exit_code(self) -> None:
        with patch(
            "orphanage_form.main.run",
            new=AsyncMock(return_value=SubmissionOutcome.SUCCESS),
        ):
            assert main(["--name", "Lar"]) == 0

    @pytest.mark.parametrize(
        "outcome",
        [
            SubmissionOutcome.INVALID,
            SubmissionOutcome.DUPLICATE_NAME_CONFLICT,
            SubmissionOutcome.UNKNOWN_ERROR,
        ],
    )
    def test_failure_exit_code(self, outcome: SubmissionOutcome) -> None:
        with patch("orphanage_form.main.run", new=AsyncMock(return_value=outcome)):
            assert main([]) == 1

    def test_unreadable_image_exit_code(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOCATION_CACHE_PATH", str(tmp_path / "location.json"))
        monkeypatch.setenv("GEOLOCATION_PROVIDER", "static")
        assert main(["--lat", "1", "--lng", "2", str(tmp_path / "missing.png")]) == 1

    def test_invalid_form_exit_code(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOCATION_CACHE_PATH", str(tmp_path / "location.json"))
        monkeypatch.setenv("GEOLOCATION_PROVIDER", "static")
        assert main(["--name", "Lar"]) == 1
