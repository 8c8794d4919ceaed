"""Stateful editing-session facade.

:class:`CustomizerSession` wraps the pure reducer the way an environment
wrapper does: it owns the current :class:`pack_mockup.state.Session`, feeds
events through :func:`pack_mockup.step.step` with the current render scale,
and exposes rendering, export and submission helpers for a UI layer.

Image decoding is asynchronous. :meth:`CustomizerSession.upload` validates
synchronously and returns the decode future; finished futures are folded into
the session by :meth:`CustomizerSession.poll_uploads`, which the UI calls on
its own thread (e.g. once per rerun). Until then the image slot renders
nothing.

Usage::

    session = CustomizerSession(template, schema)
    session.set_value("brand-name", "Golden Harvest")
    session.pointer_down(Point(200, 300))
    png = session.export("png")
"""

from concurrent.futures import Future
from typing import Any, Dict, List, Optional, Tuple, Union

from loguru import logger
from PIL import Image

from pack_mockup.actions import (
    ApplyScheme,
    DismissFilePicker,
    Event,
    ImageDecoded,
    PointerDown,
    PointerMove,
    PointerUp,
    RemoveImage,
    SelectElement,
    SetValue,
    UploadFailed,
)
from pack_mockup.config import DEFAULT_RENDER_CONFIG, RenderConfig
from pack_mockup.decode import (
    DecodeFailureError,
    ImageDecoder,
    ImageUpload,
    NonImageFileError,
)
from pack_mockup.export import export_filename, export_raster
from pack_mockup.renderer.context import RenderContext
from pack_mockup.renderer.mockup import MockupRenderer
from pack_mockup.schema import CustomizationSchema, Template
from pack_mockup.state import Session
from pack_mockup.step import step
from pack_mockup.submission import build_submission_payload
from pack_mockup.systems.customization import initial_session
from pack_mockup.types import ElementID, ExportFormat, Point

PendingUpload = Tuple["Future[Image.Image]", ImageUpload]


class CustomizerSession:
    """Interactive customization of one template.

    Args:
        template: Template being customized.
        schema: Its customization schema.
        config: Render configuration (viewport, quality, fonts).
        decoder: Image decoder; a private single-worker one is created when
            omitted and shut down by :meth:`close`.
    """

    state: Session

    def __init__(
        self,
        template: Template,
        schema: CustomizationSchema,
        config: RenderConfig = DEFAULT_RENDER_CONFIG,
        decoder: Optional[ImageDecoder] = None,
    ):
        self.template = template
        self.schema = schema
        self.config = config
        self._renderer = MockupRenderer(config)
        self._owns_decoder = decoder is None
        self._decoder = decoder or ImageDecoder()
        self._pending: Dict[ElementID, PendingUpload] = {}
        self.reset()

    def reset(self) -> Session:
        """Start over from schema defaults; pending uploads are forgotten."""
        self._pending.clear()
        self.state = initial_session(self.schema)
        logger.debug(f"Session reset for template {self.template.id}")
        return self.state

    # --- events ---

    @property
    def context(self) -> RenderContext:
        return self._renderer.context(self.template, self.state)

    def dispatch(self, event: Event) -> Session:
        self.state = step(self.state, self.schema, event, scale=self.context.scale)
        return self.state

    def set_value(self, element_id: ElementID, value: str) -> Session:
        return self.dispatch(SetValue(element_id, value))

    def apply_scheme(self, name: str) -> Session:
        return self.dispatch(ApplyScheme(name))

    def select(self, element_id: Optional[ElementID]) -> Session:
        return self.dispatch(SelectElement(element_id))

    def pointer_down(self, point: Point) -> Session:
        return self.dispatch(PointerDown(point))

    def pointer_move(self, point: Point) -> Session:
        return self.dispatch(PointerMove(point))

    def pointer_up(self) -> Session:
        return self.dispatch(PointerUp())

    def dismiss_file_picker(self) -> Session:
        return self.dispatch(DismissFilePicker())

    def remove_image(self, element_id: ElementID) -> Session:
        self._pending.pop(element_id, None)
        return self.dispatch(RemoveImage(element_id))

    # --- uploads ---

    def upload(
        self, element_id: ElementID, upload: ImageUpload
    ) -> Optional["Future[Image.Image]"]:
        """Start decoding ``upload`` for ``element_id``.

        Returns:
            The decode future, or ``None`` when the file was rejected because
            it is not an image (``state.message`` then explains why).
        """
        try:
            future = self._decoder.submit(upload)
        except NonImageFileError as e:
            logger.warning(
                f"Rejected upload {upload.filename!r} ({upload.mime_type}) "
                f"for {element_id}"
            )
            self.dispatch(UploadFailed(element_id, str(e)))
            return None
        # A newer upload supersedes an unfinished one for the same slot
        self._pending[element_id] = (future, upload)
        logger.info(f"Decoding {upload.filename!r} for {element_id}")
        return future

    @property
    def has_pending_uploads(self) -> bool:
        return bool(self._pending)

    def poll_uploads(self) -> List[ElementID]:
        """Fold finished decode futures into the session.

        Returns:
            Element ids whose upload resolved in this call, successfully or
            not.
        """
        resolved: List[ElementID] = []
        for element_id, (future, upload) in list(self._pending.items()):
            if not future.done():
                continue
            del self._pending[element_id]
            resolved.append(element_id)
            try:
                bitmap = future.result()
            except DecodeFailureError as e:
                logger.warning(f"Decoding {upload.filename!r} failed: {e}")
                self.dispatch(UploadFailed(element_id, str(e)))
                continue
            self.dispatch(
                ImageDecoded(
                    element_id,
                    bitmap,
                    filename=upload.filename,
                    mime_type=upload.mime_type,
                )
            )
            logger.info(f"Uploaded {upload.filename!r} into {element_id}")
        return resolved

    def wait_for_uploads(self, timeout: Optional[float] = None) -> List[ElementID]:
        """Block until every pending decode finished, then poll."""
        for future, _ in list(self._pending.values()):
            try:
                future.exception(timeout=timeout)
            except TimeoutError:
                logger.warning("Timed out waiting for image decoding")
        return self.poll_uploads()

    # --- output ---

    def render(self) -> Image.Image:
        return self._renderer.render(self.template, self.schema, self.state)

    def export(self, fmt: Union[ExportFormat, str] = ExportFormat.PNG) -> bytes:
        """Encode the current mockup without the selection highlight."""
        fmt = ExportFormat(fmt)
        clean = Session(
            customizations=self.state.customizations,
            uploaded_images=self.state.uploaded_images,
        )
        image = self._renderer.render(self.template, self.schema, clean)
        data = export_raster(image, fmt, quality=self.config.lossy_quality)
        logger.info(f"Exported {self.export_filename(fmt)} ({len(data)} bytes)")
        return data

    def export_filename(self, fmt: Union[ExportFormat, str] = ExportFormat.PNG) -> str:
        return export_filename(self.template.name, fmt)

    def submission_payload(self, notes: Optional[str] = None) -> Dict[str, Any]:
        return build_submission_payload(self.template, self.schema, self.state, notes)

    def close(self) -> None:
        self._pending.clear()
        if self._owns_decoder:
            self._decoder.shutdown()
