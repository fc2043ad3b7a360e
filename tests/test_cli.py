import pytest

from chrust.cli import _build_game, main
from chrust.pieces import Color
from chrust.settings import ProgramState, VizType


@pytest.mark.parametrize(
    "argv",
    [["-z", "GUI"], ["-h", "maybe"], ["-t", "-1"], ["-p", "x"]],
)
def test_bad_arguments_fail(argv, capsys):
    assert main(argv) == 1
    assert "Error:" in capsys.readouterr().err


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "--visualization_mode" in capsys.readouterr().out


def test_built_game_uses_settings_and_start_position():
    state = ProgramState(viz_type=VizType.TERM, human_plays=False, tick_speed=7, num_plies=1)
    game = _build_game(state)
    assert game.human_player.name == "kasparov"
    assert game.human_player.color is Color.WHITE
    assert game.ai_player.name == "rusty"
    assert game.ai_player.color is Color.BLACK
    assert game.human_plays is False
    assert game.tick_speed == 7
    assert game.fen() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq h3 0 1"
    assert game.check_for_winner() is None