"""Open-Meteo API endpoints.

API docs:
  - Forecast: https://open-meteo.com/en/docs
  - Geocoding: https://open-meteo.com/en/docs/geocoding-api
  - Air quality: https://open-meteo.com/en/docs/air-quality-api
"""

FORECAST_API = "https://api.open-meteo.com/v1/forecast"
GEOCODING_API = "https://geocoding-api.open-meteo.com/v1/search"
AIR_QUALITY_API = "https://air-quality-api.open-meteo.com/v1/air-quality"
