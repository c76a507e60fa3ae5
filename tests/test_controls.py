from demonophobia.controls import Debug, InputState, Key


def test_input_state_queries():
    inputs = InputState(down=[Key.A, Key.S], pressed=[Key.A], released=[Key.D])
    assert inputs.is_down(Key.A) is True
    assert inputs.is_down(Key.S) is True
    assert inputs.is_down(Key.D) is False
    assert inputs.is_pressed(Key.A) is True
    assert inputs.is_pressed(Key.S) is False
    assert inputs.is_released(Key.D) is True
    assert inputs.is_released(Key.A) is False


def test_empty_input_state():
    inputs = InputState()
    assert not any(inputs.is_down(k) or inputs.is_pressed(k) or inputs.is_released(k) for k in Key)


def test_input_states_compare_by_value():
    assert InputState(down=[Key.A, Key.D]) == InputState(down={Key.D, Key.A})


def test_debug_starts_off():
    assert Debug().debug_mode is False


def test_debug_toggles_on_f1_press():
    debug = Debug()
    debug.update(InputState(pressed=[Key.F1]))
    assert debug.debug_mode is True
    debug.update(InputState(pressed=[Key.F1]))
    assert debug.debug_mode is False


def test_debug_ignores_held_f1():
    debug = Debug()
    debug.update(InputState(down=[Key.F1]))
    assert debug.debug_mode is False


def test_debug_ignores_other_keys():
    debug = Debug(debug_mode=True)
    debug.update(InputState(pressed=[Key.A, Key.D, Key.S]))
    assert debug.debug_mode is True