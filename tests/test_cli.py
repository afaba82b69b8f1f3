"""Unit tests for trainer_architect.cli – argument parsing and output."""
import json

import pytest
from trainer_architect.cli import build_parser, format_team, main
from trainer_architect.rng import Gen3Random
from trainer_architect.team_generator import GenerationRequest


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["--habitat", "Forest", "--levels", "5", "8"])
        assert args.habitat == ["Forest"]
        assert args.levels == [5, 8]
        assert args.archetype == "Youngster"
        assert args.difficulty == "Auto"
        assert args.seed is None

    def test_hex_seed_and_repeated_habitats(self):
        args = build_parser().parse_args(
            ["--habitat", "Cave", "--habitat", "Mountain", "--levels", "40", "45", "--seed", "0x5EED"])
        assert args.habitat == ["Cave", "Mountain"]
        assert args.seed == 0x5EED

    def test_missing_habitat(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--levels", "5", "8"])

    def test_bad_difficulty_choice(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--habitat", "Forest", "--levels", "5", "8", "-d", "Insane"])


class TestMain:
    def test_json_output(self, capsys):
        rc = main(["--habitat", "Forest", "--levels", "10", "12", "--seed", "0x5EED", "--json"])
        assert rc == 0
        data = json.loads(capsys.readouterr().out)
        assert data["trainer_class"] == "Youngster"
        assert data["members"]
        assert "meets_criteria" in data["assessment"]

    def test_seeded_runs_match(self, capsys):
        argv = ["--habitat", "Water", "--levels", "20", "24", "-a", "Swimmer", "--seed", "99", "--json"]
        main(argv)
        first = capsys.readouterr().out
        main(argv)
        assert capsys.readouterr().out == first

    def test_text_output(self, capsys):
        assert main(["--habitat", "Cave", "--levels", "30", "32", "-a", "Hiker", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Hiker" in out
        assert "Coverage" in out

    def test_configuration_error_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--habitat", "Forest", "--levels", "12", "10"])
        assert exc.value.code == 2
        assert "level_min 12" in capsys.readouterr().err

    def test_unknown_habitat_exits(self):
        with pytest.raises(SystemExit):
            main(["--habitat", "Moon", "--levels", "5", "5"])


class TestFormatTeam:
    def test_lists_every_member(self, generator):
        team = generator.generate(GenerationRequest("Grassland", 15, 18, archetype="Camper"),
                                  Gen3Random(3))
        text = format_team(team)
        for member in team.members:
            assert member.species.name in text
        assert team.difficulty.value in text
