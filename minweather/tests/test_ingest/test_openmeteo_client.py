"""Tests for the Open-Meteo client with mocked httpx."""

import httpx
import pytest
import respx

from minweather.config.schema import ForecastConfig, WindSpeedUnit
from minweather.errors import DecodeFailure, NetworkFailure
from minweather.ingest.openmeteo_client import OpenMeteoClient, build_forecast_params

FORECAST_URL = "https://test-meteo.example.com/v1/forecast"


@pytest.fixture
def meteo() -> OpenMeteoClient:
    return OpenMeteoClient(base_url="https://test-meteo.example.com/v1")


class TestBuildForecastParams:
    def test_fields(self):
        params = build_forecast_params(39.78, -89.65)
        assert params["latitude"] == "39.78"
        assert params["longitude"] == "-89.65"
        assert params["current"] == (
            "temperature_2m,relative_humidity_2m,weather_code,"
            "wind_speed_10m,apparent_temperature,visibility"
        )
        assert params["hourly"] == "temperature_2m,weather_code"
        assert params["daily"] == "temperature_2m_max,temperature_2m_min,weather_code"

    def test_units_and_horizon(self):
        params = build_forecast_params(0.0, 0.0)
        assert params["temperature_unit"] == "celsius"
        assert params["wind_speed_unit"] == "mph"
        assert params["forecast_days"] == "7"
        assert params["timezone"] == "auto"

    def test_custom_wind_unit(self):
        params = build_forecast_params(0.0, 0.0, WindSpeedUnit.KMH, 3)
        assert params["wind_speed_unit"] == "kmh"
        assert params["forecast_days"] == "3"


class TestFromConfig:
    def test_copies_settings(self):
        client = OpenMeteoClient.from_config(
            ForecastConfig(
                base_url="https://x.example.com/v1/",
                wind_speed_unit="kn",
                forecast_days=5,
                timeout_seconds=4.0,
            )
        )
        assert client.base_url == "https://x.example.com/v1"
        assert client.wind_speed_unit == WindSpeedUnit.KNOTS
        assert client.forecast_days == 5
        assert client.timeout == 4.0


class TestGetForecast:
    @pytest.mark.asyncio
    @respx.mock
    async def test_success(self, meteo: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        result = await meteo.get_forecast(39.78, -89.65)
        assert result["current"]["temperature_2m"] == 21.6
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_query_params_sent(self, meteo: OpenMeteoClient, forecast_payload: dict):
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        await meteo.get_forecast(39.78, -89.65)
        request = route.calls[0].request
        assert request.url.params["latitude"] == "39.78"
        assert request.url.params["timezone"] == "auto"
        assert request.url.params["forecast_days"] == "7"
        assert "minweather" in request.headers["user-agent"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_is_network_failure(self, meteo: OpenMeteoClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(503))

        with pytest.raises(NetworkFailure) as exc_info:
            await meteo.get_forecast(39.78, -89.65)
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    @respx.mock
    async def test_bad_request_reason_reported(self, meteo: OpenMeteoClient):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(
                400, json={"error": True, "reason": "Latitude must be in range"}
            )
        )

        with pytest.raises(NetworkFailure, match="Latitude must be in range"):
            await meteo.get_forecast(139.0, 0.0)

    @pytest.mark.asyncio
    @respx.mock
    async def test_no_retry(self, meteo: OpenMeteoClient):
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(429))

        with pytest.raises(NetworkFailure):
            await meteo.get_forecast(39.78, -89.65)
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error_is_network_failure(self, meteo: OpenMeteoClient):
        respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(NetworkFailure, match="refused") as exc_info:
            await meteo.get_forecast(39.78, -89.65)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_is_decode_failure(self, meteo: OpenMeteoClient):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(DecodeFailure):
            await meteo.get_forecast(39.78, -89.65)

    @pytest.mark.asyncio
    @respx.mock
    async def test_json_list_is_decode_failure(self, meteo: OpenMeteoClient):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=[1, 2]))

        with pytest.raises(DecodeFailure, match="list"):
            await meteo.get_forecast(39.78, -89.65)

    @pytest.mark.asyncio
    @respx.mock
    async def test_shared_client(self, forecast_payload: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=forecast_payload)
        )

        async with httpx.AsyncClient() as http:
            meteo = OpenMeteoClient(
                base_url="https://test-meteo.example.com/v1", client=http
            )
            result = await meteo.get_forecast(39.78, -89.65)
        assert "hourly" in result
