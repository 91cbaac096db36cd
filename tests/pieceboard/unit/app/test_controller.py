from __future__ import annotations

from pieceboard.app.events import MoveCompleted
from pieceboard.app.state_machine import InteractionState
from pieceboard.core.errors import NotFoundError
from pieceboard.core.models import Piece, Point


def test_initial_state_is_idle_without_selection(controller_factory) -> None:
    controller, moves, redraws = controller_factory()
    assert controller.state() is InteractionState.IDLE
    assert controller.selected_id() is None
    assert not controller.drag_state().active
    assert moves == []
    assert redraws == []


def test_overlapping_pieces_drag_scenario(controller_factory) -> None:
    controller, moves, redraws = controller_factory()

    assert controller.pointer_down(Point(102.0, 102.0))
    assert controller.selected_id() == "2"
    drag = controller.drag_state()
    assert drag.active
    assert drag.dragged_id == "2"
    assert drag.pointer_offset == Point(-3.0, -3.0)
    assert controller.state() is InteractionState.DRAGGING

    assert controller.pointer_move(Point(200.0, 200.0))
    assert controller.store.get("2").position == Point(203.0, 203.0)
    assert controller.store.get("1").position == Point(100.0, 100.0)

    controller.pointer_up()
    assert moves == [MoveCompleted(piece_id="2", final_position=Point(203.0, 203.0))]
    assert controller.state() is InteractionState.IDLE
    assert controller.selected_id() == "2"
    assert not controller.drag_state().active
    assert controller.drag_state().dragged_id is None
    assert redraws == ["redraw", "redraw"]


def test_drag_delta_is_independent_of_grab_point(controller_factory) -> None:
    for grab in (Point(100.0, 100.0), Point(112.0, 95.0), Point(88.5, 103.25)):
        pieces = (Piece("solo", Point(100.0, 100.0), "#fff", 0),)
        controller, _, _ = controller_factory(pieces)
        controller.pointer_down(grab)
        controller.pointer_move(grab + Point(37.0, -12.0))
        assert controller.store.get("solo").position == Point(137.0, 88.0)


def test_moves_after_release_are_ignored(controller_factory) -> None:
    controller, moves, redraws = controller_factory()
    controller.pointer_down(Point(100.0, 100.0))
    controller.pointer_move(Point(150.0, 150.0))
    controller.pointer_up()
    position = controller.store.get("2").position
    redraw_count = len(redraws)

    assert not controller.pointer_move(Point(400.0, 400.0))

    assert controller.store.get("2").position == position
    assert len(redraws) == redraw_count
    assert len(moves) == 1


def test_pointer_leave_commits_like_pointer_up(controller_factory) -> None:
    controller, moves, _ = controller_factory()
    controller.pointer_down(Point(100.0, 100.0))
    controller.pointer_move(Point(700.0, 20.0))

    controller.pointer_leave()

    assert moves == [MoveCompleted("2", Point(705.0, 25.0))]
    assert controller.store.get("2").position == Point(705.0, 25.0)
    assert controller.selected_id() == "2"
    assert controller.state() is InteractionState.IDLE


def test_release_without_drag_emits_nothing(controller_factory) -> None:
    controller, moves, redraws = controller_factory()
    assert not controller.pointer_up()
    assert not controller.pointer_leave()
    assert moves == []
    assert redraws == []


def test_click_on_empty_space_clears_selection(controller_factory) -> None:
    controller, moves, redraws = controller_factory()
    controller.pointer_down(Point(100.0, 100.0))
    controller.pointer_up()
    assert controller.selected_id() == "2"

    assert controller.pointer_down(Point(500.0, 500.0))

    assert controller.selected_id() is None
    assert controller.state() is InteractionState.IDLE
    assert not controller.drag_state().active
    assert redraws == ["redraw", "redraw"]
    assert len(moves) == 1


def test_empty_click_without_selection_changes_nothing(controller_factory) -> None:
    controller, moves, redraws = controller_factory()
    assert not controller.pointer_down(Point(500.0, 500.0))
    assert controller.selected_id() is None
    assert not controller.drag_state().active
    assert redraws == []
    assert moves == []


def test_selecting_a_then_b_switches_selection(controller_factory) -> None:
    pieces = (
        Piece("A", Point(50.0, 50.0), "#f00", 1),
        Piece("B", Point(300.0, 300.0), "#0f0", 1),
    )
    controller, moves, _ = controller_factory(pieces)
    controller.pointer_down(Point(50.0, 50.0))
    controller.pointer_up()
    assert controller.selected_id() == "A"

    controller.pointer_down(Point(305.0, 300.0))

    assert controller.selected_id() == "B"
    assert controller.drag_state().dragged_id == "B"
    assert controller.store.get("A").position == Point(50.0, 50.0)
    assert [move.piece_id for move in moves] == ["A"]


def test_pointer_down_while_dragging_completes_previous_gesture(controller_factory) -> None:
    pieces = (
        Piece("A", Point(50.0, 50.0), "#f00", 1),
        Piece("B", Point(300.0, 300.0), "#0f0", 1),
    )
    controller, moves, _ = controller_factory(pieces)
    controller.pointer_down(Point(50.0, 50.0))
    controller.pointer_move(Point(60.0, 60.0))

    controller.pointer_down(Point(300.0, 300.0))

    assert moves == [MoveCompleted("A", Point(60.0, 60.0))]
    assert controller.drag_state().dragged_id == "B"
    assert controller.selected_id() == "B"


def test_idle_pointer_move_is_noop(controller_factory) -> None:
    controller, _, redraws = controller_factory()
    assert not controller.pointer_move(Point(100.0, 100.0))
    assert controller.store.revision() == 0
    assert redraws == []


def test_drag_state_copy_is_detached(controller_factory) -> None:
    controller, _, _ = controller_factory()
    controller.pointer_down(Point(100.0, 100.0))
    copy = controller.drag_state()
    copy.clear()
    assert controller.drag_state().active


def test_missing_drag_target_returns_to_idle(controller_factory, monkeypatch) -> None:
    controller, moves, redraws = controller_factory()
    controller.pointer_down(Point(102.0, 102.0))

    def _raise(piece_id: str, new_position: Point) -> Piece:
        raise NotFoundError(piece_id)

    monkeypatch.setattr(controller.store, "update_position", _raise)

    assert not controller.pointer_move(Point(150.0, 150.0))
    assert controller.state() is InteractionState.IDLE
    assert not controller.drag_state().active
    assert not controller.pointer_up()
    assert moves == []
    assert redraws == ["redraw"]


def test_selected_id_read_leaves_stale_selection_for_handlers(controller_factory, monkeypatch) -> None:
    controller, moves, redraws = controller_factory()
    monkeypatch.setattr(controller, "_selected_id", "ghost")

    assert controller.selected_id() is None
    assert controller.selected_id() is None
    assert controller._selected_id == "ghost"

    assert not controller.pointer_down(Point(500.0, 500.0))
    assert controller._selected_id is None
    assert redraws == []
