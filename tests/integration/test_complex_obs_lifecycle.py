"""Integration tests for complex obs save/load/purge through the container."""

import io

import pytest

from complex_obs.domain.entities import ComplexData, Obs
from complex_obs.infrastructure.config import Config
from complex_obs.infrastructure.container import Container, get_container


@pytest.mark.integration
class TestContainerWiring:
    """The container builds a working file-backed handler."""

    def test_container_uses_configured_directory(self, container: Container, test_config: Config):
        expected = test_config.storage.resolve_complex_obs_dir()
        assert container.storage.location == expected.absolute()
        assert expected.is_dir()
        assert container.text_handler.get_handler_type() == "TextHandler"

    def test_container_singleton(self, container: Container):
        assert get_container() is container
        assert Container.get() is container

    def test_reset(self, container: Container):
        Container.reset()
        assert Container._instance is None


@pytest.mark.integration
class TestLifecycle:
    """End-to-end save, load, purge on disk."""

    def test_save_load_purge(self, container: Container):
        handler = container.text_handler
        text = "Discharge summary\n\nNo complications.\n"
        obs = Obs(obs_id=1, complex_data=ComplexData(title="summary.txt", data=text))

        handler.save_obs(obs)

        filename = obs.parsed_value_complex().filename
        path = container.storage.location / filename
        assert path.read_text(encoding="utf-8") == text
        assert obs.value_complex == f"{filename} file |{filename}"

        # A fresh record loaded from the host only carries value_complex
        reloaded = Obs(uuid=obs.uuid, obs_id=1, value_complex=obs.value_complex)
        handler.get_obs(reloaded, "TEXT")
        assert reloaded.complex_data.data == text

        assert handler.purge_complex_data(reloaded) is True
        assert not path.exists()

        handler.get_obs(reloaded)
        assert reloaded.complex_data is None

    def test_many_observations(self, container: Container):
        handler = container.text_handler
        observations = [
            Obs(complex_data=ComplexData(title="note.txt", data=f"note {i}")) for i in range(5)
        ]
        for obs in observations:
            handler.save_obs(obs)

        assert len(container.storage.list_files()) == 5
        for i, obs in enumerate(observations):
            handler.get_obs(obs)
            assert obs.complex_data.data == f"note {i}"

    def test_stream_payload_from_file(self, container: Container, temp_dir):
        source = temp_dir / "incoming.txt"
        source.write_text("streamed line\n" * 1000, encoding="utf-8")

        with open(source, "r", encoding="utf-8", newline="") as reader:
            obs = Obs(complex_data=ComplexData(title="incoming.txt", data=reader))
            container.text_handler.save_obs(obs)

        container.text_handler.get_obs(obs)
        assert obs.complex_data.data == "streamed line\n" * 1000

    def test_closed_stream_fails(self, container: Container):
        reader = io.StringIO("never read")
        reader.close()
        obs = Obs(complex_data=ComplexData(title="closed.txt", data=reader))

        from complex_obs.ports.inbound import ComplexDataStreamError

        with pytest.raises(ComplexDataStreamError):
            container.text_handler.save_obs(obs)
        assert container.storage.list_files() == []
