"""End-to-end tests for the command-line driver."""

import pytest

import main
from geometry.world import HittableList


class TestScenes:
    """Tests for the built-in scenes."""

    @pytest.mark.parametrize("name", sorted(main.SCENES))
    def test_scene_builds(self, name):
        world, view = main.SCENES[name]()
        assert isinstance(world, HittableList)
        assert len(world) >= 2
        assert isinstance(view, dict)

    def test_materials_scene_shares_no_state_between_calls(self):
        first, _ = main.materials_scene()
        second, _ = main.materials_scene()
        assert first.objects[0] is not second.objects[0]


class TestCli:
    """Tests for main()."""

    def test_renders_ppm(self, tmp_path):
        output = tmp_path / "out.ppm"
        status = main.main([
            "--scene", "ground_and_sphere", "--width", "8", "--aspect-ratio", "2",
            "--samples", "1", "--max-depth", "2", "--seed", "3", "--output", str(output),
        ])
        assert status == 0
        text = output.read_text()
        assert text.startswith("P3\n8 4\n255\n")
        assert len(text.splitlines()) == 3 + 4

    def test_seeded_runs_are_identical(self, tmp_path):
        args = ["--scene", "defocus", "--width", "6", "--aspect-ratio", "1.5",
                "--quality", "preview", "--seed", "9"]
        main.main(args + ["--output", str(tmp_path / "a.ppm")])
        main.main(args + ["--output", str(tmp_path / "b.ppm")])
        assert (tmp_path / "a.ppm").read_text() == (tmp_path / "b.ppm").read_text()

    def test_invalid_configuration_exits_nonzero(self, tmp_path):
        status = main.main(["--width", "0", "--output", str(tmp_path / "x.ppm")])
        assert status == 2
        assert not (tmp_path / "x.ppm").exists()

    def test_unwritable_output_exits_nonzero(self, tmp_path):
        status = main.main([
            "--scene", "ground_and_sphere", "--width", "2", "--aspect-ratio", "1",
            "--samples", "1", "--max-depth", "1",
            "--output", str(tmp_path / "missing" / "out.ppm"),
        ])
        assert status == 1

    def test_unknown_scene_rejected(self):
        with pytest.raises(SystemExit):
            main.main(["--scene", "nope"])
