import pytest
from duelsim.battle.service import BattleService
from duelsim.battle.engine import BattleState
from duelsim.core.errors import InvalidArgumentError
from duelsim.core.logging import logger


@pytest.fixture(autouse=True)
def quiet_logger():
    logger.set_level("ERROR")
    yield
    logger.set_level("INFO")


def test_start_runs_to_completion_with_seed():
    svc = BattleService()
    r1 = svc.start("Heavy", "Ana", "Precise", "Ben", seed=42)
    r2 = svc.start("LanceBackend", "Ana", "CamilleDebugger", "Ben", seed=42)
    assert r1.events == r2.events
    assert r1.winner in {"Ana (LanceBackend)", "Ben (CamilleDebugger)"}


def test_prepare_returns_unstarted_engine():
    engine = BattleService().prepare("Agile", "Kim", "Balanced", "Jo", seed=1)
    assert engine.state is BattleState.NOT_STARTED
    assert engine.first.name == "Kim (KensemiCollon)"
    assert engine.second.name == "Jo (JeffPancitCanton)"


def test_injected_random_source_used_without_seed(scripted):
    svc = BattleService(rng=scripted([25] * 7))
    r = svc.start("Precise", "A", "Precise", "B")
    assert r.turns == 7
    assert r.winner == "A (CamilleDebugger)"


def test_invalid_selection_raises_before_battle():
    with pytest.raises(InvalidArgumentError):
        BattleService().start("Bard", "A", "Precise", "B")
    with pytest.raises(InvalidArgumentError):
        BattleService().start("Precise", " ", "Precise", "B")


def test_start_and_end_logged(capsys):
    logger.set_level("INFO")
    BattleService().start("Precise", "A", "Heavy", "B", seed=9)
    out = capsys.readouterr().out
    assert "BattleStart" in out and "BattleEnd" in out


def test_default_service_satisfies_protocol():
    from duelsim.battle.service import IBattleService, battle_service
    assert isinstance(battle_service, IBattleService)
    assert isinstance(BattleService(), IBattleService)


def test_names_checked_before_selections():
    with pytest.raises(InvalidArgumentError, match="Player 2 name cannot be empty"):
        BattleService().prepare("Wizard", "A", "Heavy", "  ")


def test_messages_name_the_rejected_player():
    with pytest.raises(InvalidArgumentError, match="Player 1 name cannot be empty"):
        BattleService().prepare("Heavy", "", "Heavy", "B")
    with pytest.raises(InvalidArgumentError, match="Player 1 must select a character"):
        BattleService().prepare("", "A", "Heavy", "B")
    with pytest.raises(InvalidArgumentError, match="Invalid character selection"):
        BattleService().prepare("Heavy", "A", "Bard", "B")
