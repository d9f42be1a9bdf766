"""Open-Meteo weather integration for StudyWell."""

import logging
import os
from typing import Any, Dict, Optional
import requests
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

WEATHER_API_BASE = os.getenv("WEATHER_API_BASE", "https://api.open-meteo.com/v1")
GEOCODING_API_BASE = os.getenv("GEOCODING_API_BASE", "https://geocoding-api.open-meteo.com/v1")

# Fallback location: Hiroshima
DEFAULT_LATITUDE = os.getenv("WEATHER_DEFAULT_LAT", "34.3853")
DEFAULT_LONGITUDE = os.getenv("WEATHER_DEFAULT_LON", "132.4553")


class WeatherError(Exception):
    """The forecast could not be fetched."""


class WeatherClient:
    """Client for the Open-Meteo forecast and reverse-geocoding APIs."""

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """Initialize weather client.

        Args:
            timeout: Per-request timeout in seconds. If None, reads WEATHER_TIMEOUT_SEC (default 10).
            session: Optional requests session (mainly for connection reuse).
        """
        self.timeout = timeout if timeout is not None else float(os.getenv("WEATHER_TIMEOUT_SEC", "10"))
        self.http = session or requests

    def fetch_forecast(self, latitude: str, longitude: str) -> Dict[str, Any]:
        """Fetch current weather plus hourly and daily forecasts.

        Raises:
            WeatherError: If the API call fails
        """
        url = f"{WEATHER_API_BASE}/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "hourly": "temperature_2m,apparent_temperature,precipitation_probability",
            "daily": "weathercode,temperature_2m_max,temperature_2m_min,precipitation_probability_max",
            "timezone": "Asia/Tokyo",
        }
        try:
            response = self.http.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.RequestException, ValueError) as e:
            raise WeatherError(f"weather api error: {e}") from e

    def fetch_place_label(self, latitude: str, longitude: str) -> str:
        """Human-readable place name for a coordinate, or "" when unavailable.

        The label joins name, admin2, admin1 and country with "・".
        """
        url = f"{GEOCODING_API_BASE}/reverse"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "language": "ja",
            "format": "json",
        }
        try:
            response = self.http.get(url, params=params, timeout=self.timeout)
            if not response.ok:
                return ""
            results = (response.json() or {}).get("results") or []
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Reverse geocoding failed: {type(e).__name__}: {str(e)}")
            return ""

        if not results:
            return ""
        first = results[0]
        parts = [first.get(key) for key in ("name", "admin2", "admin1", "country")]
        return "・".join(p for p in parts if isinstance(p, str) and p)

    def lookup(self, latitude: Optional[str] = None, longitude: Optional[str] = None) -> Dict[str, Any]:
        """Forecast and place label for a location (defaults to the fallback location)."""
        latitude = latitude or DEFAULT_LATITUDE
        longitude = longitude or DEFAULT_LONGITUDE
        data = self.fetch_forecast(latitude, longitude)
        return {"ok": True, "data": data, "placeLabel": self.fetch_place_label(latitude, longitude)}
