"""Tests for input buffering."""

from pong.controls.input import Direction, InputBuffer, PaddleControl


def test_empty_buffer_gives_no_direction():
    control = InputBuffer().poll()
    assert control == PaddleControl()
    assert not control.is_pointer
    assert control.direction is Direction.NONE


def test_last_pointer_sample_wins():
    buffer = InputBuffer()
    buffer.pointer_moved(100.0)
    buffer.pointer_moved(180.0)
    assert buffer.poll().target_y == 180.0


def test_pointer_takes_precedence_over_keys():
    buffer = InputBuffer()
    buffer.key_changed(Direction.DOWN, held=True)
    buffer.pointer_moved(42.0)

    control = buffer.poll()
    assert control.is_pointer
    assert control.target_y == 42.0

    # Sample consumed; held key takes over again
    assert buffer.poll() == PaddleControl.keys(Direction.DOWN)


def test_pointer_sample_survives_until_polled():
    buffer = InputBuffer()
    buffer.pointer_moved(75.0)
    assert buffer.has_pointer_sample
    # Nothing polls while the game holds after a point
    assert buffer.has_pointer_sample
    assert buffer.poll().target_y == 75.0
    assert not buffer.has_pointer_sample


def test_up_wins_when_both_keys_held():
    buffer = InputBuffer()
    buffer.key_changed(Direction.DOWN, held=True)
    buffer.key_changed(Direction.UP, held=True)
    assert buffer.direction is Direction.UP

    buffer.key_changed(Direction.UP, held=False)
    assert buffer.direction is Direction.DOWN


def test_release_all():
    buffer = InputBuffer()
    buffer.key_changed(Direction.UP, held=True)
    buffer.release_all()
    assert buffer.poll().direction is Direction.NONE
