import pytest

from pack_mockup.actions import PointerDown, PointerMove, PointerUp, SelectElement
from pack_mockup.state import InteractionPhase
from pack_mockup.step import step
from pack_mockup.systems.interaction import (
    pointer_down_system,
    pointer_move_system,
    pointer_up_system,
)
from pack_mockup.types import ElementType, Point
from tests.test_utils import make_element, make_schema, make_session, with_upload


def _image_schema():
    return make_schema(
        make_element("photo", ElementType.IMAGE, position=(10, 10)),
        make_element("title", position=(0, 200), default_value="Title"),
    )


def test_drag_preserves_grab_offset() -> None:
    schema = _image_schema()
    state = with_upload(make_session(schema), "photo")

    state = pointer_down_system(state, schema, Point(15, 15))
    assert state.phase == InteractionPhase.DRAGGING
    assert state.drag is not None and state.drag.pointer_offset == Point(5, 5)

    state = pointer_move_system(state, Point(35, 25))
    assert state.uploaded_images["photo"].position == Point(30, 20)

    state = pointer_up_system(state)
    assert state.phase == InteractionPhase.SELECTED
    assert state.selected_element_id == "photo"
    assert state.uploaded_images["photo"].position == Point(30, 20)


def test_drag_through_reducer_converts_device_points() -> None:
    schema = _image_schema()
    state = with_upload(make_session(schema), "photo")
    scale = 2.0

    state = step(state, schema, PointerDown(Point(30, 30)), scale=scale)
    state = step(state, schema, PointerMove(Point(70, 50)), scale=scale)
    state = step(state, schema, PointerUp(), scale=scale)

    assert state.uploaded_images["photo"].position == Point(30, 20)
    assert state.drag is None


def test_drag_is_not_clamped() -> None:
    schema = _image_schema()
    state = with_upload(make_session(schema), "photo")
    state = pointer_down_system(state, schema, Point(10, 10))
    state = pointer_move_system(state, Point(-500, 900))
    assert state.uploaded_images["photo"].position == Point(-500, 900)


def test_empty_image_slot_requests_file_picker() -> None:
    schema = _image_schema()
    state = pointer_down_system(make_session(schema), schema, Point(20, 20))
    assert state.file_picker_request == "photo"
    assert state.selected_element_id == "photo"
    assert state.drag is None


def test_text_hit_selects_without_drag() -> None:
    schema = _image_schema()
    state = pointer_down_system(make_session(schema), schema, Point(50, 210))
    assert state.phase == InteractionPhase.SELECTED
    assert state.selected_element_id == "title"
    assert state.file_picker_request is None


def test_miss_clears_selection() -> None:
    schema = _image_schema()
    state = pointer_down_system(make_session(schema), schema, Point(50, 210))
    state = pointer_down_system(state, schema, Point(500, 500))
    assert state.phase == InteractionPhase.IDLE
    assert state.selected_element_id is None


def test_move_without_drag_is_noop() -> None:
    schema = _image_schema()
    state = make_session(schema)
    assert pointer_move_system(state, Point(1, 1)) is state
    assert pointer_up_system(state) is state


def test_select_event_ends_drag() -> None:
    schema = _image_schema()
    state = with_upload(make_session(schema), "photo")
    state = pointer_down_system(state, schema, Point(15, 15))
    state = step(state, schema, SelectElement("title"))
    assert state.drag is None
    assert state.selected_element_id == "title"


def test_unknown_event_raises() -> None:
    schema = _image_schema()
    with pytest.raises(ValueError):
        step(make_session(schema), schema, object())  # type: ignore[arg-type]
