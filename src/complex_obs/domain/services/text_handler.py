"""Handler storing text complex obs payloads on the file system.

Incoming payloads are either a string or a readable text stream. The
payload is written to a file in the complex obs directory and the file
name is recorded on the obs as ``"<name> file |<name>"``.
"""

from __future__ import annotations

from typing import Iterator, Optional

from complex_obs.domain.entities.complex_data import ComplexData
from complex_obs.domain.entities.obs import Obs
from complex_obs.domain.services.abstract_handler import AbstractHandler
from complex_obs.domain.value_objects import TEXT_MIME_TYPE, ObsView, ValueComplex
from complex_obs.infrastructure.tracing import trace_span
from complex_obs.ports.inbound import (
    ComplexDataStreamError,
    ComplexObsError,
    UnsupportedComplexDataError,
)

HANDLER_TYPE = "TextHandler"

STREAM_CHUNK_SIZE = 8192


class TextHandler(AbstractHandler):
    """Complex obs handler for character data."""

    def get_handler_type(self) -> str:
        return HANDLER_TYPE

    def get_supported_views(self) -> list[str]:
        return [ObsView.TEXT.value, ObsView.RAW.value, ObsView.URI.value]

    def get_obs(self, obs: Obs, view: Optional[str] = None) -> Obs:
        """Load the stored text into ``obs.complex_data``.

        Read failures are logged and leave ``complex_data`` as None;
        they never raise.

        Args:
            obs: Observation with value_complex set.
            view: Requested view. ``"download"`` strips commas, spaces
                and a trailing ``file`` from the title.

        Returns:
            The same obs.
        """
        with trace_span(
            "text_handler.get_obs", {"obs.uuid": obs.uuid, "view": view}
        ), self._metrics.load_latency.labels(handler=HANDLER_TYPE).time():
            complex_data = self._load(obs, view)

        obs.complex_data = complex_data
        return obs

    def _load(self, obs: Obs, view: Optional[str]) -> ComplexData | None:
        try:
            value_complex = obs.parsed_value_complex()
        except ValueError:
            self._logger.error(
                "complex_obs_reference_missing",
                obs_id=obs.obs_id,
                obs_uuid=obs.uuid,
                value_complex=obs.value_complex,
            )
            self._metrics.read_failures.labels(handler=HANDLER_TYPE).inc()
            return None

        path = self.storage.path_for(value_complex.filename)
        self._logger.debug(
            "complex_obs_loading",
            value_complex=obs.value_complex,
            file_path=str(path),
        )

        if ObsView.from_name(view) is ObsView.DOWNLOAD:
            title = value_complex.download_title()
        else:
            title = value_complex.title

        try:
            text = self.storage.read_text(value_complex.filename)
        except (OSError, UnicodeDecodeError):
            self._logger.exception("complex_obs_read_failed", file_path=str(path))
            self._metrics.read_failures.labels(handler=HANDLER_TYPE).inc()
            return None

        self._metrics.obs_loaded.labels(handler=HANDLER_TYPE, view=view or "default").inc()
        self._metrics.bytes_read.labels(handler=HANDLER_TYPE).inc(len(text))
        return ComplexData(title=title, data=text, mime_type=TEXT_MIME_TYPE, length=len(text))

    def save_obs(self, obs: Obs) -> Obs:
        """Write ``obs.complex_data`` to a new file.

        On success ``value_complex`` names the file and ``complex_data``
        is cleared. An obs without complex data is logged and returned
        unchanged.

        Args:
            obs: Observation carrying complex_data.

        Returns:
            The same obs.

        Raises:
            UnsupportedComplexDataError: If the payload is not text or a text stream.
            ComplexDataStreamError: If the payload stream cannot be read.
            ComplexObsError: If the file cannot be written.
        """
        complex_data = obs.complex_data
        if complex_data is None:
            self._logger.error(
                "complex_data_missing",
                obs_id=obs.obs_id,
                obs_uuid=obs.uuid,
                reason="Cannot save complex data because its ComplexData is null",
            )
            self._metrics.missing_complex_data.labels(handler=HANDLER_TYPE).inc()
            return obs

        with trace_span(
            "text_handler.save_obs", {"obs.uuid": obs.uuid}
        ), self._metrics.save_latency.labels(handler=HANDLER_TYPE).time():
            try:
                filename, written = self._write(obs, complex_data)
            except ComplexObsError as e:
                self._metrics.save_failures.labels(
                    handler=HANDLER_TYPE, error_type=type(e).__name__
                ).inc()
                self._logger.error("complex_obs_save_failed", obs_uuid=obs.uuid, error=str(e))
                raise

        obs.value_complex = str(ValueComplex.for_stored_file(filename))
        obs.complex_data = None

        self._metrics.obs_saved.labels(handler=HANDLER_TYPE).inc()
        self._metrics.bytes_written.labels(handler=HANDLER_TYPE).inc(written)
        self._logger.info(
            "complex_obs_saved",
            obs_uuid=obs.uuid,
            filename=filename,
            characters=written,
        )
        return obs

    def _write(self, obs: Obs, complex_data: ComplexData) -> tuple[str, int]:
        data = complex_data.data
        if not isinstance(data, str) and not complex_data.is_stream():
            raise UnsupportedComplexDataError(
                f"Unsupported complex data type: {type(data).__name__}"
            )

        filename = self.output_filename(obs)
        try:
            written = self.storage.write_chunks(filename, self._chunks(complex_data))
        except (OSError, UnicodeError) as e:
            raise ComplexObsError("Trying to write complex obs to the file system.") from e
        return filename, written

    @staticmethod
    def _chunks(complex_data: ComplexData) -> Iterator[str]:
        """Yield the payload as text chunks, draining streams."""
        data = complex_data.data
        if isinstance(data, str):
            yield data
            return

        while True:
            try:
                chunk = data.read(STREAM_CHUNK_SIZE)
            except (OSError, ValueError) as e:
                raise ComplexDataStreamError("Unable to read complex data stream") from e
            if not chunk:
                break
            if not isinstance(chunk, str):
                raise ComplexDataStreamError(
                    f"Complex data stream returned {type(chunk).__name__}, expected text"
                )
            yield chunk
