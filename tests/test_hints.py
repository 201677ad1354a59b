import pytest

from shelfkeys.hints import KeyHint, get_hints
from shelfkeys.keystate import KeyState, Mode, Operator


def keys_of(hints):
    return [h.key for h in hints]


def test_visual_hints():
    state = KeyState(mode=Mode.VISUAL)
    keys = keys_of(get_hints(state))
    assert "y" in keys
    assert "d" in keys
    assert "o" in keys


@pytest.mark.parametrize("mode", [Mode.VISUAL_LINE, Mode.VISUAL_BLOCK])
def test_other_visual_modes_share_hints(mode):
    assert get_hints(KeyState(mode=mode)) == get_hints(KeyState(mode=Mode.VISUAL))


def test_operator_hints():
    state = KeyState(pending_operator=Operator.DELETE)
    keys = keys_of(get_hints(state))
    assert "j" in keys
    assert "ib" in keys


def test_operator_hints_order():
    hints = get_hints(KeyState(pending_operator=Operator.YANK))
    assert hints[0] == KeyHint("j", "down")
    assert hints[-1] == KeyHint("if", "inner folder")
    assert len(hints) == 17


def test_change_op_hints():
    state = KeyState(pending_operator=Operator.CHANGE)
    hints = get_hints(state)
    assert KeyHint("a", "author") in hints
    assert KeyHint("s", "status") in hints
    assert KeyHint("y", "year") in hints
    assert hints[0] == KeyHint("a", "author")
    assert hints[6] == KeyHint("j", "down")


def test_register_hints():
    state = KeyState(pending_register_select=True)
    assert "+" in keys_of(get_hints(state))


def test_register_select_takes_priority_over_operator():
    state = KeyState(pending_register_select=True, pending_operator=Operator.DELETE)
    assert keys_of(get_hints(state)) == ["0-9", "a-z", "+", "*", "_"]


def test_space_hints():
    state = KeyState(pending_key=" ")
    assert "/" in keys_of(get_hints(state))


def test_z_hints():
    state = KeyState(pending_key="z")
    keys = keys_of(get_hints(state))
    assert "a" in keys
    assert "R" in keys


def test_sort_hints():
    hints = get_hints(KeyState(pending_key="S"))
    assert KeyHint("Y", "year asc") in hints
    assert KeyHint("u", "updated (default)") in hints


@pytest.mark.parametrize("key", ["f", "F", "t", "T"])
def test_find_char_hints(key):
    assert get_hints(KeyState(pending_key=key)) == [KeyHint("<char>", "jump to char")]


def test_macro_replay_hints():
    assert keys_of(get_hints(KeyState(pending_key="@"))) == ["a-z", "@"]


def test_recording_hints():
    state = KeyState()
    state.macro_recorder.start_recording("a")
    hints = get_hints(state)
    assert hints[0] == KeyHint("q", "stop recording")


def test_normal_mode_hints():
    hints = get_hints(KeyState())
    assert hints
    keys = keys_of(hints)
    assert any("j" in k for k in keys)
    assert any("d" in k for k in keys)
    assert any("u" in k for k in keys)


def test_unknown_pending_key_falls_back_to_normal():
    assert get_hints(KeyState(pending_key="x")) == get_hints(KeyState())