from arkanoid.states import GameState


def test_states_in_order():
    names = [GameState(state.value).name for state in GameState]
    assert names == ["WELCOME", "IN_GAME", "END_GAME"]


def test_states_round_trip_by_value_and_name():
    for state in GameState:
        assert GameState(state.value) is state
        assert GameState[state.name] is state


def test_states_are_distinct():
    looked_up = {GameState(state.value) for state in GameState}
    assert len(looked_up) == 3