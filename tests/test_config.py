"""Tests for configuration, logging setup and the DI container."""

import logging
from unittest.mock import MagicMock

import pytest

from photon_geocoder.adapters.geocoding import PhotonAdapter
from photon_geocoder.adapters.http import GeopyHttpClient
from photon_geocoder.config import AppConfig, ObservabilityConfig, get_config, reset_config
from photon_geocoder.container import Container, get_container, reset_container
from photon_geocoder.logging_config import configure_logging
from photon_geocoder.ports import GeocoderPort, HttpClientPort


class TestConfig:
    def test_defaults(self):
        config = get_config()

        assert config.photon.root_url == "https://photon.komoot.io"
        assert config.http.timeout_seconds == 10.0
        assert config.observability.level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PHOTON_ROOT_URL", "http://localhost:2322")
        monkeypatch.setenv("PHOTON_HTTP_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("PHOTON_LOG_LEVEL", "DEBUG")

        config = get_config()

        assert config.photon.root_url == "http://localhost:2322"
        assert config.http.timeout_seconds == 2.5
        assert config.observability.level == "DEBUG"

    def test_config_is_cached_until_reset(self):
        first = get_config()
        assert get_config() is first

        reset_config()
        assert get_config() is not first


class TestLogging:
    def test_configure_logging_applies_config(self, monkeypatch):
        basic_config = MagicMock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)

        configure_logging(ObservabilityConfig(level="warning", format="%(message)s"))

        basic_config.assert_called_once_with(
            level="WARNING", format="%(message)s", force=True
        )

    def test_configure_logging_defaults_to_app_config(self, monkeypatch):
        basic_config = MagicMock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)
        monkeypatch.setenv("PHOTON_LOG_LEVEL", "debug")

        configure_logging()

        assert basic_config.call_args.kwargs["level"] == "DEBUG"


class TestContainer:
    def test_default_bindings(self, monkeypatch):
        monkeypatch.setenv("PHOTON_ROOT_URL", "http://photon.local/")

        container = Container.create_default(AppConfig())
        geocoder = container.resolve(GeocoderPort)

        assert isinstance(geocoder, PhotonAdapter)
        assert geocoder.root_url == "http://photon.local"
        assert isinstance(geocoder.http_client, GeopyHttpClient)
        assert geocoder.http_client is container.resolve(HttpClientPort)

    def test_singletons_are_resolved_once(self):
        container = Container()
        container.register(HttpClientPort, MagicMock)

        assert container.resolve(HttpClientPort) is container.resolve(HttpClientPort)

        container.clear_singletons()
        container.register(HttpClientPort, MagicMock, singleton=False)
        assert container.resolve(HttpClientPort) is not container.resolve(HttpClientPort)

    def test_override_http_client(self):
        fake_http = MagicMock()
        fake_http.get_text.return_value = '{"features": []}'

        container = Container.create_default()
        container.register(HttpClientPort, lambda: fake_http)

        assert container.resolve(GeocoderPort).geocode("Berlin").is_empty
        fake_http.get_text.assert_called_once()

    def test_unregistered_type(self):
        container = Container()

        assert not container.is_registered(GeocoderPort)
        with pytest.raises(KeyError):
            container.resolve(GeocoderPort)

    def test_global_container(self):
        container = get_container()
        assert get_container() is container

        reset_container()
        assert get_container() is not container
