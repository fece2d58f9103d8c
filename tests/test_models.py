import pytest

from atomblaster_ui.models import (
    BossIntroModel,
    FadeInModel,
    GameModel,
    GameOverModel,
    IntroModel,
    MenuModel,
    PauseModel,
    TitleModel,
)


def test_title_menu_starts_on_start_game():
    model = TitleModel()
    assert model.selected_option == "Start Game"
    assert model.menu_options == ["Start Game", "Instructions", "Exit"]


def test_title_menu_next_and_wrap():
    model = TitleModel()
    model.select_next_item()
    assert model.selected_option == "Instructions"
    model.select_next_item()
    model.select_next_item()
    assert model.selected_option == "Start Game"


def test_title_menu_previous_wraps_to_last():
    model = TitleModel()
    model.select_previous_item()
    assert model.selected_option == "Exit"


def test_pause_menu_options():
    game = GameModel(score=10)
    model = PauseModel(game_model=game)
    assert model.selected_option == "Resume"
    model.select_previous_item()
    assert model.selected_option == "Quit"
    assert model.game_model is game


def test_next_then_previous_is_identity():
    model = MenuModel(menu_options=["a", "b", "c", "d"], selected_item=2)
    model.select_next_item()
    model.select_previous_item()
    assert model.selected_item == 2


def test_empty_menu_rejected():
    with pytest.raises(ValueError):
        MenuModel(menu_options=[])


def test_out_of_range_selection_rejected():
    with pytest.raises(ValueError):
        MenuModel(menu_options=["only"], selected_item=1)


def test_fade_in_alpha_follows_timer_then_saturates():
    model = FadeInModel()
    model.update(0.25)
    assert model.alpha == model.timer == 0.25
    model.update(2.0)
    assert model.alpha == 1.0
    assert model.timer == pytest.approx(2.25)


@pytest.mark.parametrize("cls", [IntroModel, BossIntroModel])
def test_intro_models_fade(cls):
    model = cls()
    assert model.alpha == 0.0
    for _ in range(20):
        model.update(0.1)
    assert model.alpha == 1.0


def test_game_over_snapshot_is_independent_of_later_changes():
    game = GameModel(
        score=1200, level=4, elapsed_time=95, scientists_rescued=3, total_scientists=5
    )
    summary = GameOverModel.from_game_model(game, player_won=True)
    game.score = 0
    game.level = 1
    assert summary.final_score == 1200
    assert summary.levels_complete == 4
    assert summary.time_elapsed == 95
    assert summary.scientists == 3
    assert summary.total_scientists == 5
    assert summary.player_won is True
    assert summary.game_model is game