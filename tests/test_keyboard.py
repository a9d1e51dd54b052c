import pytest

from mondrian.direction import Direction
from mondrian.keyboard import (
    ActionRunner,
    Function,
    KeyAction,
    KeyboardState,
    KeyState,
    combo_name,
    sort_keys,
)

PRIORITY = {"Control_L": 0, "Shift_L": 1}


def test_sort_keys_by_priority():
    assert sort_keys(["a", "Shift_L", "Control_L"], PRIORITY) == [
        "Control_L",
        "Shift_L",
        "a",
    ]


def test_sort_keys_is_stable_for_unknown_keys():
    assert sort_keys(["b", "a", "c"], PRIORITY) == ["b", "a", "c"]


def test_sort_keys_high_priority_after_default():
    assert sort_keys(["Late", "x"], {"Late": 4}) == ["x", "Late"]


def test_combo_name_joins_with_plus():
    assert combo_name(["Return", "Control_L"], PRIORITY) == "Control_L+Return"


def test_press_sets_mainmod_and_release_clears_it():
    state = KeyboardState(priority=PRIORITY)
    assert state.press("Control_L") == "Control_L"
    assert state.mainmod is True
    assert state.press("Return") == "Control_L+Return"
    state.release("Control_L")
    assert state.mainmod is False
    assert state.press("q") == "Return+q"


def test_repeated_press_not_duplicated():
    state = KeyboardState()
    state.press("a")
    assert state.press("a") == "a"
    assert state.pressed == ["a"]


def test_release_other_key_keeps_mainmod():
    state = KeyboardState(priority=PRIORITY)
    state.press("Control_L")
    state.press("x")
    state.release("x")
    assert state.mainmod is True
    assert state.pressed == ["Control_L"]


def test_function_direction_and_workspace():
    assert KeyAction.internal(Function.UP).function.direction is Direction.UP
    assert KeyAction.internal(Function.RIGHT).function.direction is Direction.RIGHT
    assert KeyAction.internal(Function.QUIT).function.direction is None
    assert KeyAction.internal(Function.SWITCH_WORKSPACE_2).function.workspace == 2
    assert KeyAction.internal(Function.EXPANSION).function.workspace is None


def test_key_action_requires_exactly_one_kind():
    with pytest.raises(ValueError):
        KeyAction()
    with pytest.raises(ValueError):
        KeyAction(function=Function.QUIT, command="foot")


def test_key_state_lookup_by_value():
    assert {KeyState(v).value for v in ("pressed", "released")} == {
        "pressed",
        "released",
    }
    with pytest.raises(ValueError):
        KeyState("held")


def test_run_command_spawns_with_args():
    calls = []
    action = KeyAction.run_command("foot", ["-e", "htop"])
    runner = ActionRunner({"Control_L+Return": action}, spawn=calls.append)
    assert runner.run("Control_L+Return") == action
    assert calls == [["foot", "-e", "htop"]]


def test_run_command_failure_is_not_raised():
    def failing(argv):
        raise FileNotFoundError(argv[0])

    action = KeyAction.run_command("missing-program")
    runner = ActionRunner({"k": action}, spawn=failing)
    assert runner.run("k") == action


def test_unbound_keys_do_nothing():
    calls = []
    runner = ActionRunner({}, dispatch=calls.append, spawn=calls.append)
    assert runner.run("Control_L+z") is None
    assert calls == []


def test_internal_function_is_dispatched():
    seen = []
    runner = ActionRunner(
        {"Control_L+Up": KeyAction.internal(Function.UP)}, dispatch=seen.append
    )
    runner.run("Control_L+Up")
    assert seen == [Function.UP]


def test_kill_exits():
    seen = []
    runner = ActionRunner(
        {"Control_L+k": KeyAction.internal(Function.KILL)}, dispatch=seen.append
    )
    with pytest.raises(SystemExit) as info:
        runner.run("Control_L+k")
    assert info.value.code == 0
    assert seen == []


def test_json_is_not_dispatched():
    seen = []
    action = KeyAction.internal(Function.JSON)
    runner = ActionRunner({"j": action}, dispatch=seen.append)
    assert runner.run("j") == action
    assert seen == []