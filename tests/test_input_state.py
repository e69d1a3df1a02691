from game.shapes.input_state import KEY_BINDINGS, InputState


def frame(inputs):
    inputs.begin_frame()
    state = (inputs.clicked, set(inputs.pressed_keys))
    inputs.end_frame()
    return state


def test_click_edge_fires_once_per_press():
    inputs = InputState()
    inputs.press_mouse(10, 20)
    clicks = [frame(inputs)[0] for _ in range(5)]
    assert clicks == [True, False, False, False, False]
    assert inputs.mouse == (10, 20)


def test_press_and_release_within_one_frame_still_clicks():
    inputs = InputState()
    inputs.press_mouse(1, 1)
    inputs.release_mouse(1, 1)
    assert frame(inputs)[0] is True
    assert frame(inputs)[0] is False


def test_edges_are_stable_within_a_frame():
    inputs = InputState()
    inputs.press_mouse(0, 0)
    inputs.begin_frame()
    # several screens reading the same frame all see the click
    assert inputs.clicked and inputs.clicked
    inputs.end_frame()
    assert not inputs.clicked


def test_keys_are_level_triggered():
    inputs = InputState()
    inputs.press_key("left")
    for _ in range(3):
        frame(inputs)
        assert inputs.is_held("left")
    inputs.release_key("left")
    assert not inputs.is_held("left")


def test_key_press_edge():
    inputs = InputState()
    inputs.press_key("escape")
    assert frame(inputs)[1] == {"escape"}
    # auto-repeat of a held key is not a new press
    inputs.press_key("escape")
    assert frame(inputs)[1] == set()


def test_consume_clears_key():
    inputs = InputState()
    inputs.press_key("escape")
    inputs.begin_frame()
    assert inputs.was_pressed("escape")
    inputs.consume("escape")
    assert not inputs.was_pressed("escape")
    assert not inputs.is_held("escape")
    inputs.end_frame()


def test_release_does_not_click():
    inputs = InputState()
    inputs.press_mouse(0, 0)
    frame(inputs)
    inputs.release_mouse(5, 5)
    assert frame(inputs)[0] is False
    assert inputs.mouse == (5, 5)


def test_key_bindings_cover_every_action():
    assert set(KEY_BINDINGS.values()) == {"left", "right", "shoot", "escape"}
    assert KEY_BINDINGS["LEFT"] == KEY_BINDINGS["A"] == "left"
    assert KEY_BINDINGS["RIGHT"] == KEY_BINDINGS["D"] == "right"
    assert KEY_BINDINGS["SPACE"] == "shoot"
    assert KEY_BINDINGS["ESCAPE"] == "escape"
