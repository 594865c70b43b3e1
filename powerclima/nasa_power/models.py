"""Modelos e constantes para dados NASA POWER."""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field


class GeoCoordinates(BaseModel):
    """Ponto geografico consultado na API."""

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    model_config = {"frozen": True}


class Region(StrEnum):
    """Comunidades e cidades autonomas da Espanha."""

    ANDALUCIA = "Andalucía"
    ARAGON = "Aragón"
    ASTURIAS = "Asturias"
    BALEARES = "Islas Baleares"
    CANARIAS = "Islas Canarias"
    CANTABRIA = "Cantabria"
    CASTILLA_LA_MANCHA = "Castilla-La Mancha"
    CASTILLA_Y_LEON = "Castilla y León"
    CATALUNA = "Cataluña"
    EXTREMADURA = "Extremadura"
    GALICIA = "Galicia"
    MADRID = "Madrid"
    MURCIA = "Murcia"
    NAVARRA = "Navarra"
    PAIS_VASCO = "País Vasco"
    LA_RIOJA = "La Rioja"
    COMUNIDAD_VALENCIANA = "Comunidad Valenciana"
    CEUTA = "Ceuta"
    MELILLA = "Melilla"


# Grafias alternativas aceitas na busca por nome (chave em casefold).
REGION_ALIASES: MappingProxyType[str, Region] = MappingProxyType(
    {
        "catalunna": Region.CATALUNA,
    }
)


def _coords(lat: float, lon: float) -> GeoCoordinates:
    return GeoCoordinates(latitude=lat, longitude=lon)


# Coordenadas centrais aproximadas de cada regiao.
# Usadas como ponto representativo para consultas NASA POWER.
REGION_COORDS: MappingProxyType[Region, GeoCoordinates] = MappingProxyType(
    {
        Region.ANDALUCIA: _coords(37.5, -4.5),
        Region.ARAGON: _coords(41.5, -0.5),
        Region.ASTURIAS: _coords(43.3, -6.0),
        Region.BALEARES: _coords(39.5, 3.0),
        Region.CANARIAS: _coords(28.3, -16.5),
        Region.CANTABRIA: _coords(43.2, -4.0),
        Region.CASTILLA_LA_MANCHA: _coords(39.5, -3.0),
        Region.CASTILLA_Y_LEON: _coords(41.8, -4.5),
        Region.CATALUNA: _coords(41.8, 1.5),
        Region.EXTREMADURA: _coords(39.0, -6.0),
        Region.GALICIA: _coords(42.5, -8.0),
        Region.MADRID: _coords(40.4, -3.7),
        Region.MURCIA: _coords(38.0, -1.5),
        Region.NAVARRA: _coords(42.8, -1.6),
        Region.PAIS_VASCO: _coords(43.0, -2.5),
        Region.LA_RIOJA: _coords(42.3, -2.5),
        Region.COMUNIDAD_VALENCIANA: _coords(39.5, -0.5),
        Region.CEUTA: _coords(35.9, -5.3),
        Region.MELILLA: _coords(35.3, -2.9),
    }
)


class MeteoParam(StrEnum):
    """Parametros diarios da API NASA POWER usados pelo powerclima."""

    T2M = "T2M"  # Temperatura media a 2m (C)
    T2M_MAX = "T2M_MAX"  # Temperatura maxima a 2m (C)
    T2M_MIN = "T2M_MIN"  # Temperatura minima a 2m (C)
    T2MDEW = "T2MDEW"  # Ponto de orvalho a 2m (C)
    T2MWET = "T2MWET"  # Bulbo umido a 2m (C)
    RH2M = "RH2M"  # Umidade relativa a 2m (%)
    RH2M_HR = "RH2M_HR"  # Umidade relativa maxima a 2m (%)
    PRECTOTCORR = "PRECTOTCORR"  # Precipitacao corrigida (mm/dia)
    WS10M = "WS10M"  # Velocidade do vento a 10m (m/s)
    WD10M = "WD10M"  # Direcao do vento a 10m (graus)
    PS = "PS"  # Pressao na superficie (kPa)
    CLOUD_AMT = "CLOUD_AMT"  # Cobertura de nuvens (%)
    ALLSKY_SFC_SW_DWN = "ALLSKY_SFC_SW_DWN"  # Radiacao solar incidente (MJ/m2/dia)
    ALLSKY_SFC_PAR_TOT = "ALLSKY_SFC_PAR_TOT"  # Radiacao fotossinteticamente ativa (W/m2)
    TSOIL1 = "TSOIL1"  # Temperatura do solo, camada 1 (C)
    TSOIL2 = "TSOIL2"  # Temperatura do solo, camada 2 (C)
    GWETROOT = "GWETROOT"  # Umidade da zona radicular
    GWETTOP = "GWETTOP"  # Umidade da camada superficial
    GWETPROF = "GWETPROF"  # Umidade do perfil do solo
    EVLAND = "EVLAND"  # Evaporacao sobre terra (mm/dia)


# Parametros padrao para consultas por regiao.
DEFAULT_REGION_PARAMS: list[MeteoParam] = [
    MeteoParam.T2M,
    MeteoParam.T2M_MAX,
    MeteoParam.T2M_MIN,
    MeteoParam.PRECTOTCORR,
    MeteoParam.RH2M,
    MeteoParam.WS10M,
    MeteoParam.TSOIL1,
    MeteoParam.TSOIL2,
    MeteoParam.EVLAND,
    MeteoParam.ALLSKY_SFC_PAR_TOT,
]

# Conjunto agroclimatico completo (API aceita no maximo 20 parametros por request).
AGRO_PARAMS: list[MeteoParam] = [
    MeteoParam.T2M,
    MeteoParam.T2M_MAX,
    MeteoParam.T2M_MIN,
    MeteoParam.PRECTOTCORR,
    MeteoParam.RH2M,
    MeteoParam.WS10M,
    MeteoParam.WD10M,
    MeteoParam.PS,
    MeteoParam.CLOUD_AMT,
    MeteoParam.ALLSKY_SFC_SW_DWN,
    MeteoParam.TSOIL1,
    MeteoParam.TSOIL2,
    MeteoParam.GWETROOT,
    MeteoParam.GWETTOP,
    MeteoParam.EVLAND,
    MeteoParam.ALLSKY_SFC_PAR_TOT,
    MeteoParam.T2MDEW,
    MeteoParam.T2MWET,
]

# Codigos antigos que ainda aparecem em respostas e alimentam o mesmo campo.
LEGACY_FIELD_MAP: dict[str, str] = {
    "T_SOIL": "soil_temperature",
    "PRECTOT": "precipitation",
    "SOIL_M": "soil_moisture",
    "GDD10": "growing_degree_days",
}

MODERN_FIELD_MAP: dict[str, str] = {
    MeteoParam.T2M: "temperature",
    MeteoParam.T2M_MAX: "max_temperature",
    MeteoParam.T2M_MIN: "min_temperature",
    MeteoParam.PRECTOTCORR: "precipitation",
    MeteoParam.RH2M: "humidity",
    MeteoParam.RH2M_HR: "max_humidity",
    MeteoParam.WS10M: "wind_speed",
    MeteoParam.WD10M: "wind_direction",
    MeteoParam.PS: "pressure",
    MeteoParam.CLOUD_AMT: "cloud_cover",
    MeteoParam.ALLSKY_SFC_SW_DWN: "solar_radiation",
    MeteoParam.ALLSKY_SFC_PAR_TOT: "par_radiation",
    MeteoParam.TSOIL1: "soil_temperature",
    MeteoParam.TSOIL2: "deep_soil_temperature",
    MeteoParam.GWETROOT: "root_zone_moisture",
    MeteoParam.GWETTOP: "top_soil_moisture",
    MeteoParam.GWETPROF: "soil_moisture_profile",
    MeteoParam.EVLAND: "evapotranspiration",
    MeteoParam.T2MDEW: "dew_point",
    MeteoParam.T2MWET: "wet_bulb_temperature",
}

# Ordem de aplicacao importa: legado primeiro, moderno por ultimo.
# Quando ambos existem na mesma data, o codigo moderno sobrescreve o legado.
PARAM_FIELD_MAP: tuple[tuple[str, str], ...] = (
    *LEGACY_FIELD_MAP.items(),
    *((str(code), field) for code, field in MODERN_FIELD_MAP.items()),
)


class DailyWeatherRecord(BaseModel):
    """Medicoes diarias de um ponto NASA POWER.

    Os valores sao mantidos como vieram da API, inclusive o fill value (-999).
    Campos ausentes na resposta ficam None.
    """

    date: str = Field(..., pattern=r"^[0-9]{8}$")

    temperature: float | None = None
    max_temperature: float | None = None
    min_temperature: float | None = None
    precipitation: float | None = None
    humidity: float | None = None
    max_humidity: float | None = None
    min_humidity: float | None = None
    wind_speed: float | None = None
    wind_direction: float | None = None
    pressure: float | None = None
    cloud_cover: float | None = None
    solar_radiation: float | None = None
    par_radiation: float | None = None
    soil_temperature: float | None = None
    deep_soil_temperature: float | None = None
    soil_moisture: float | None = None
    root_zone_moisture: float | None = None
    top_soil_moisture: float | None = None
    soil_moisture_profile: float | None = None
    evapotranspiration: float | None = None
    growing_degree_days: float | None = None
    dew_point: float | None = None
    wet_bulb_temperature: float | None = None

    model_config = {"frozen": True}

    def measurements(self) -> dict[str, Any]:
        """Campos efetivamente preenchidos, sem a data."""
        return self.model_dump(exclude_unset=True, exclude_none=True, exclude={"date"})
