"""
Parameter vocabularies recognised by the Open-Meteo APIs.

Each enum is a closed set of variable names for one query field. The member
value is the exact name sent on the wire, and declaration order is the order
``all()`` uses.

API docs:
  - Forecast: https://open-meteo.com/en/docs
  - Air quality: https://open-meteo.com/en/docs/air-quality-api
"""

from __future__ import annotations

from enum import StrEnum


class CurrentParameter(StrEnum):
    """Variables for the ``current`` field of the forecast API."""

    TEMPERATURE_2M = "temperature_2m"
    RELATIVEHUMIDITY_2M = "relativehumidity_2m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    IS_DAY = "is_day"
    PRECIPITATION = "precipitation"
    RAIN = "rain"
    SHOWERS = "showers"
    SNOWFALL = "snowfall"
    WEATHERCODE = "weathercode"
    CLOUDCOVER = "cloudcover"
    PRESSURE_MSL = "pressure_msl"
    SURFACE_PRESSURE = "surface_pressure"
    WINDSPEED_10M = "windspeed_10m"
    WINDDIRECTION_10M = "winddirection_10m"
    WINDGUSTS_10M = "windgusts_10m"


class HourlyParameter(StrEnum):
    """Variables for the ``hourly`` field of the forecast API."""

    TEMPERATURE_2M = "temperature_2m"
    RELATIVEHUMIDITY_2M = "relativehumidity_2m"
    DEWPOINT_2M = "dewpoint_2m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    PRECIPITATION_PROBABILITY = "precipitation_probability"
    PRECIPITATION = "precipitation"
    RAIN = "rain"
    SHOWERS = "showers"
    SNOWFALL = "snowfall"
    SNOW_DEPTH = "snow_depth"
    WEATHERCODE = "weathercode"
    PRESSURE_MSL = "pressure_msl"
    SURFACE_PRESSURE = "surface_pressure"
    CLOUDCOVER = "cloudcover"
    CLOUDCOVER_LOW = "cloudcover_low"
    CLOUDCOVER_MID = "cloudcover_mid"
    CLOUDCOVER_HIGH = "cloudcover_high"
    VISIBILITY = "visibility"
    EVAPOTRANSPIRATION = "evapotranspiration"
    ET0_FAO_EVAPOTRANSPIRATION = "et0_fao_evapotranspiration"
    VAPOR_PRESSURE_DEFICIT = "vapor_pressure_deficit"
    WINDSPEED_10M = "windspeed_10m"
    WINDSPEED_80M = "windspeed_80m"
    WINDSPEED_120M = "windspeed_120m"
    WINDSPEED_180M = "windspeed_180m"
    WINDDIRECTION_10M = "winddirection_10m"
    WINDDIRECTION_80M = "winddirection_80m"
    WINDDIRECTION_120M = "winddirection_120m"
    WINDDIRECTION_180M = "winddirection_180m"
    WINDGUSTS_10M = "windgusts_10m"
    TEMPERATURE_80M = "temperature_80m"
    TEMPERATURE_120M = "temperature_120m"
    TEMPERATURE_180M = "temperature_180m"
    SOIL_TEMPERATURE_0CM = "soil_temperature_0cm"
    SOIL_TEMPERATURE_6CM = "soil_temperature_6cm"
    SOIL_TEMPERATURE_18CM = "soil_temperature_18cm"
    SOIL_TEMPERATURE_54CM = "soil_temperature_54cm"
    SOIL_MOISTURE_0_1CM = "soil_moisture_0_1cm"
    SOIL_MOISTURE_1_3CM = "soil_moisture_1_3cm"
    SOIL_MOISTURE_3_9CM = "soil_moisture_3_9cm"
    SOIL_MOISTURE_9_27CM = "soil_moisture_9_27cm"
    SOIL_MOISTURE_27_81CM = "soil_moisture_27_81cm"
    SHORTWAVE_RADIATION = "shortwave_radiation"
    DIRECT_RADIATION = "direct_radiation"
    DIFFUSE_RADIATION = "diffuse_radiation"
    DIRECT_NORMAL_IRRADIANCE = "direct_normal_irradiance"
    CAPE = "cape"
    FREEZINGLEVEL_HEIGHT = "freezinglevel_height"
    IS_DAY = "is_day"


class DailyParameter(StrEnum):
    """Variables for the ``daily`` field of the forecast API."""

    WEATHERCODE = "weathercode"
    TEMPERATURE_2M_MAX = "temperature_2m_max"
    TEMPERATURE_2M_MIN = "temperature_2m_min"
    APPARENT_TEMPERATURE_MAX = "apparent_temperature_max"
    APPARENT_TEMPERATURE_MIN = "apparent_temperature_min"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    PRECIPITATION_SUM = "precipitation_sum"
    RAIN_SUM = "rain_sum"
    SHOWERS_SUM = "showers_sum"
    SNOWFALL_SUM = "snowfall_sum"
    PRECIPITATION_HOURS = "precipitation_hours"
    WINDSPEED_10M_MAX = "windspeed_10m_max"
    WINDGUSTS_10M_MAX = "windgusts_10m_max"
    WINDDIRECTION_10M_DOMINANT = "winddirection_10m_dominant"
    SHORTWAVE_RADIATION_SUM = "shortwave_radiation_sum"
    ET0_FAO_EVAPOTRANSPIRATION = "et0_fao_evapotranspiration"


class Minutely15Parameter(StrEnum):
    """Variables for the ``minutely_15`` field of the forecast API.

    15-minute data is native for Central Europe and North America only;
    elsewhere the API interpolates it from hourly values.
    """

    TEMPERATURE_2M = "temperature_2m"
    RELATIVEHUMIDITY_2M = "relativehumidity_2m"
    DEWPOINT_2M = "dewpoint_2m"
    APPARENT_TEMPERATURE = "apparent_temperature"
    SHORTWAVE_RADIATION = "shortwave_radiation"
    DIRECT_RADIATION = "direct_radiation"
    DIRECT_NORMAL_IRRADIANCE = "direct_normal_irradiance"
    DIFFUSE_RADIATION = "diffuse_radiation"
    SUNSHINE_DURATION = "sunshine_duration"
    LIGHTNING_POTENTIAL = "lightning_potential"
    PRECIPITATION = "precipitation"
    SNOWFALL = "snowfall"
    RAIN = "rain"
    SHOWERS = "showers"
    SNOWFALL_HEIGHT = "snowfall_height"
    FREEZINGLEVEL_HEIGHT = "freezinglevel_height"
    CAPE = "cape"
    WINDSPEED_10M = "windspeed_10m"
    WINDSPEED_80M = "windspeed_80m"
    WINDDIRECTION_10M = "winddirection_10m"
    WINDDIRECTION_80M = "winddirection_80m"
    WINDGUSTS_10M = "windgusts_10m"
    VISIBILITY = "visibility"
    WEATHERCODE = "weathercode"
    IS_DAY = "is_day"


class ModelsParameter(StrEnum):
    """Numerical weather models for the ``models`` field."""

    BEST_MATCH = "best_match"
    ECMWF_IFS04 = "ecmwf_ifs04"
    METNO_NORDIC = "metno_nordic"
    GFS_SEAMLESS = "gfs_seamless"
    GFS_GLOBAL = "gfs_global"
    GFS_HRRR = "gfs_hrrr"
    JMA_SEAMLESS = "jma_seamless"
    JMA_MSM = "jma_msm"
    JMA_GSM = "jma_gsm"
    ICON_SEAMLESS = "icon_seamless"
    ICON_GLOBAL = "icon_global"
    ICON_EU = "icon_eu"
    ICON_D2 = "icon_d2"
    GEM_SEAMLESS = "gem_seamless"
    GEM_GLOBAL = "gem_global"
    GEM_REGIONAL = "gem_regional"
    GEM_HRDPS_CONTINENTAL = "gem_hrdps_continental"
    METEOFRANCE_SEAMLESS = "meteofrance_seamless"
    METEOFRANCE_ARPEGE_WORLD = "meteofrance_arpege_world"
    METEOFRANCE_ARPEGE_EUROPE = "meteofrance_arpege_europe"
    METEOFRANCE_AROME_FRANCE = "meteofrance_arome_france"
    METEOFRANCE_AROME_FRANCE_HD = "meteofrance_arome_france_hd"


class AirQualityHourlyParameter(StrEnum):
    """Variables for the ``hourly`` field of the air-quality API."""

    PM10 = "pm10"
    PM2_5 = "pm2_5"
    CARBON_MONOXIDE = "carbon_monoxide"
    NITROGEN_DIOXIDE = "nitrogen_dioxide"
    SULPHUR_DIOXIDE = "sulphur_dioxide"
    OZONE = "ozone"
    AEROSOL_OPTICAL_DEPTH = "aerosol_optical_depth"
    DUST = "dust"
    UV_INDEX = "uv_index"
    UV_INDEX_CLEAR_SKY = "uv_index_clear_sky"
    AMMONIA = "ammonia"
    ALDER_POLLEN = "alder_pollen"
    BIRCH_POLLEN = "birch_pollen"
    GRASS_POLLEN = "grass_pollen"
    MUGWORT_POLLEN = "mugwort_pollen"
    OLIVE_POLLEN = "olive_pollen"
    RAGWEED_POLLEN = "ragweed_pollen"
    EUROPEAN_AQI = "european_aqi"
    EUROPEAN_AQI_PM2_5 = "european_aqi_pm2_5"
    EUROPEAN_AQI_PM10 = "european_aqi_pm10"
    EUROPEAN_AQI_NO2 = "european_aqi_no2"
    EUROPEAN_AQI_O3 = "european_aqi_o3"
    EUROPEAN_AQI_SO2 = "european_aqi_so2"
    US_AQI = "us_aqi"
    US_AQI_PM2_5 = "us_aqi_pm2_5"
    US_AQI_PM10 = "us_aqi_pm10"
    US_AQI_NO2 = "us_aqi_no2"
    US_AQI_CO = "us_aqi_co"
    US_AQI_O3 = "us_aqi_o3"
    US_AQI_SO2 = "us_aqi_so2"
