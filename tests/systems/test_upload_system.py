from pack_mockup.actions import DismissFilePicker, ImageDecoded, RemoveImage, UploadFailed
from pack_mockup.step import step
from pack_mockup.systems.interaction import pointer_down_system
from pack_mockup.types import ElementType, Point
from tests.test_utils import make_element, make_schema, make_session, solid_bitmap, with_upload


def _schema():
    return make_schema(
        make_element("photo", ElementType.IMAGE, position=(10, 10)),
        make_element("title", default_value="Title"),
    )


def test_decoded_image_is_stored_and_clears_picker() -> None:
    schema = _schema()
    state = pointer_down_system(make_session(schema), schema, Point(20, 20))
    assert state.file_picker_request == "photo"

    bitmap = solid_bitmap((4, 4))
    state = step(state, schema, ImageDecoded("photo", bitmap, "a.png", "image/png"))
    uploaded = state.uploaded_images["photo"]
    assert uploaded.bitmap is bitmap
    assert uploaded.position is None
    assert uploaded.filename == "a.png"
    assert state.file_picker_request is None


def test_reupload_resets_position_override() -> None:
    schema = _schema()
    state = with_upload(make_session(schema), "photo", position=Point(90, 90))
    state = step(state, schema, ImageDecoded("photo", solid_bitmap()))
    assert state.uploaded_images["photo"].position is None


def test_decoded_image_for_non_image_element_is_dropped() -> None:
    schema = _schema()
    state = make_session(schema)
    assert step(state, schema, ImageDecoded("title", solid_bitmap())) is state


def test_failure_sets_message_and_keeps_slot_empty() -> None:
    schema = _schema()
    state = step(make_session(schema), schema, UploadFailed("photo", "Could not decode image"))
    assert state.message == "Could not decode image"
    assert "photo" not in state.uploaded_images

    # A later successful retry clears the notice
    state = step(state, schema, ImageDecoded("photo", solid_bitmap()))
    assert state.message is None
    assert "photo" in state.uploaded_images


def test_remove_image_ends_drag() -> None:
    schema = _schema()
    state = with_upload(make_session(schema), "photo")
    state = pointer_down_system(state, schema, Point(15, 15))
    assert state.drag is not None

    state = step(state, schema, RemoveImage("photo"))
    assert "photo" not in state.uploaded_images
    assert state.drag is None


def test_dismiss_file_picker() -> None:
    schema = _schema()
    state = pointer_down_system(make_session(schema), schema, Point(20, 20))
    state = step(state, schema, DismissFilePicker())
    assert state.file_picker_request is None
    assert step(state, schema, DismissFilePicker()) is state
