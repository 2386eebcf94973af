"""Tests for settings, logging setup and the command line entry point."""

import logging

import pytest

from pathtracer.config import QUALITY_LEVELS, RenderSettings
from pathtracer.logging_config import setup_logging
from pathtracer.main import build_parser, main


class TestRenderSettings:
    """Tests for RenderSettings validation and presets."""

    def test_height_from_aspect_ratio(self):
        assert RenderSettings(width=400, aspect_ratio=2.0).height == 200
        assert RenderSettings(width=300, aspect_ratio=1.5).height == 200

    def test_from_quality(self):
        settings = RenderSettings.from_quality("preview", width=10)
        assert settings.samples_per_pixel == QUALITY_LEVELS["preview"]["samples_per_pixel"]
        assert settings.max_depth == QUALITY_LEVELS["preview"]["max_depth"]
        assert settings.width == 10

    def test_none_overrides_are_ignored(self):
        settings = RenderSettings.from_quality("final", samples_per_pixel=None, seed=3)
        assert settings.samples_per_pixel == QUALITY_LEVELS["final"]["samples_per_pixel"]
        assert settings.seed == 3

    def test_unknown_quality(self):
        with pytest.raises(ValueError):
            RenderSettings.from_quality("ultra")

    @pytest.mark.parametrize("overrides", [
        {"width": 1},
        {"aspect_ratio": 0},
        {"width": 10, "aspect_ratio": 8},
        {"samples_per_pixel": 0},
        {"max_depth": -1},
        {"workers": 0},
    ])
    def test_invalid_values(self, overrides):
        with pytest.raises(ValueError):
            RenderSettings(**overrides)

    def test_zero_depth_is_allowed(self):
        assert RenderSettings(max_depth=0).max_depth == 0


class TestSetupLogging:
    def test_handlers_do_not_stack(self):
        logger = setup_logging("pathtracer.test_logging", "DEBUG")
        logger = setup_logging("pathtracer.test_logging", "DEBUG")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "render.log"
        logger = setup_logging("pathtracer.test_file_logging", "INFO", log_file)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        setup_logging("pathtracer.test_file_logging", "INFO")

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("pathtracer.test_level", "chatty").level == logging.INFO


class TestMain:
    """Tests for the command line entry point."""

    ARGS = ["--scene", "quads", "--width", "8", "--samples", "1", "--max-depth", "2",
            "--workers", "1", "--seed", "3", "--log-level", "WARNING"]

    @pytest.fixture(autouse=True)
    def detach_handlers(self):
        """main() binds handlers to the captured streams; drop them afterwards."""
        yield
        logger = logging.getLogger("pathtracer")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.scene == "cornell_box"
        assert args.output == "-"
        assert args.aspect_ratio == 1.0

    def test_writes_ppm_file(self, tmp_path):
        out = tmp_path / "quads.ppm"
        assert main(self.ARGS + ["--output", str(out)]) == 0
        lines = out.read_text().splitlines()
        assert lines[:3] == ["P3", "8 8", "255"]
        assert len(lines) == 3 + 64

    def test_writes_png_file(self, tmp_path):
        out = tmp_path / "quads.png"
        assert main(self.ARGS + ["-o", str(out)]) == 0
        assert out.read_bytes().startswith(b"\x89PNG")

    def test_writes_ppm_to_stdout(self, capsys):
        assert main(self.ARGS) == 0
        assert capsys.readouterr().out.startswith("P3\n8 8\n255\n")

    def test_same_seed_same_output(self, tmp_path):
        a, b = tmp_path / "a.ppm", tmp_path / "b.ppm"
        main(self.ARGS + ["-o", str(a)])
        main(self.ARGS + ["-o", str(b)])
        assert a.read_text() == b.read_text()

    def test_missing_texture_fails(self, tmp_path):
        args = ["--scene", "earth", "--texture", str(tmp_path / "missing.jpg"),
                "--width", "8", "--workers", "1", "-o", str(tmp_path / "earth.ppm")]
        assert main(args) == 1
        assert not (tmp_path / "earth.ppm").exists()

    def test_invalid_settings_fail(self, tmp_path):
        assert main(["--width", "1", "--workers", "1", "-o", str(tmp_path / "x.ppm")]) == 1

    def test_unknown_scene_is_rejected_by_parser(self):
        with pytest.raises(SystemExit):
            main(["--scene", "teapot"])
